from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.schemas import Category
from infrastructure.config import load_browser_config
from infrastructure.config.models import BrowserConfig, CategorySourceConfig
from infrastructure.constants import DATA_DIR_ENV

CONFIG_YAML = """\
data_dir: data
page_size: 5
start_category: Content
categories:
  product: {file: p.tsv}
  content: {file: c.tsv, skip_lines: 1}
  audience: {file: a.tsv}
"""


def _write_config(tmp_path: Path, text: str = CONFIG_YAML) -> Path:
    cfg_dir = tmp_path / "configs"
    cfg_dir.mkdir()
    path = cfg_dir / "browser.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_relative_data_dir_resolves_against_repo_root(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    cfg = load_browser_config(_write_config(tmp_path))

    assert cfg.data_dir == tmp_path.resolve() / "data"
    assert cfg.page_size == 5
    assert cfg.start_category is Category.CONTENT
    assert cfg.categories[Category.CONTENT].skip_lines == 1
    assert cfg.source_path(Category.PRODUCT) == tmp_path.resolve() / "data" / "p.tsv"


def test_environment_overrides_data_dir(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "elsewhere"))
    cfg = load_browser_config(_write_config(tmp_path))
    assert cfg.data_dir == tmp_path / "elsewhere"


def test_missing_category_is_rejected() -> None:
    with pytest.raises(ValidationError, match="audience"):
        BrowserConfig(
            categories={
                Category.PRODUCT: CategorySourceConfig(file="p.tsv"),
                Category.CONTENT: CategorySourceConfig(file="c.tsv"),
            }
        )


def test_negative_skip_lines_is_rejected() -> None:
    with pytest.raises(ValidationError):
        CategorySourceConfig(file="p.tsv", skip_lines=-1)


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_browser_config(_write_config(tmp_path, "- just\n- a list\n"))


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_browser_config(tmp_path / "nope.yaml")


def test_repo_config_declares_content_section_header(repo_config_path: Path) -> None:
    cfg = load_browser_config(repo_config_path)
    assert cfg.categories[Category.CONTENT].skip_lines == 1
