from collections.abc import Callable
from pathlib import Path

import pytest

from domain.schemas import Category, TaxonomyRecord

REPO_ROOT = Path(__file__).resolve().parent.parent


def _make_record(
    id: str,
    parent: str | None = None,
    name: str | None = None,
    *,
    tiers: tuple[str, ...] = (),
    extension: str | None = None,
    category: Category = Category.PRODUCT,
) -> TaxonomyRecord:
    return TaxonomyRecord(
        id=id,
        parent_id=parent,
        name=name or f"Node {id}",
        tiers=tiers,
        extension=extension,
        category=category,
    )


@pytest.fixture
def make_record() -> Callable[..., TaxonomyRecord]:
    return _make_record


@pytest.fixture
def chain_records() -> list[TaxonomyRecord]:
    """A (root) <- B <- C."""
    return [
        _make_record("A", None, "Alpha"),
        _make_record("B", "A", "Bravo"),
        _make_record("C", "B", "Charlie"),
    ]


@pytest.fixture
def repo_config_path() -> Path:
    return REPO_ROOT / "configs" / "browser.yaml"
