"""Non-interactive listing: request resolution and record formatting."""

import argparse
import logging
from collections.abc import Iterable

from rich.markup import escape

from application.constants import (
    CATEGORY_COLORS,
    LABEL_EXTENSION,
    LABEL_ID,
    LABEL_NAME,
    LABEL_PARENT,
    LABEL_TIERS,
    TIER_SEPARATOR,
)
from domain.schemas import Category, TaxonomyRecord
from domain.taxonomy.filtering import FilterKind, RecordFilter
from domain.taxonomy.store import RecordStore

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Invalid combination of command-line selectors."""


def selected_categories(args: argparse.Namespace) -> list[Category]:
    return [c for c in Category if getattr(args, c.value, False)]


def resolve_category(args: argparse.Namespace, default: Category | None = None) -> Category:
    """
    Exactly one of --product/--content/--audience must be set.

    Args:
        args: Parsed CLI namespace
        default: Returned when no flag is set; None makes that a usage error

    Raises:
        UsageError: If several flags are set, or none and no default exists
    """
    chosen = selected_categories(args)
    if len(chosen) > 1:
        raise UsageError("Can only specify one of --product, --content or --audience at a time")
    if not chosen:
        if default is None:
            raise UsageError("Must specify one of --product, --content, or --audience")
        return default
    return chosen[0]


def resolve_filter(args: argparse.Namespace) -> RecordFilter:
    """
    Exactly one of --id/--parent/--name must be set.

    Raises:
        UsageError: If none or several filters are given
    """
    given = [(kind, getattr(args, kind.value)) for kind in FilterKind if getattr(args, kind.value, None) is not None]
    if len(given) > 1:
        raise UsageError("Options --id, --parent and --name are mutually exclusive")
    if not given:
        raise UsageError("Must specify one of --id, --parent, or --name")
    kind, value = given[0]
    return RecordFilter(kind=kind, value=value)


def format_record(record: TaxonomyRecord) -> str:
    """Render one record as a rich-markup block (labels coloured by category)."""
    color = CATEGORY_COLORS[record.category.value]

    def line(label: str, value: str | None) -> str:
        return f"[bold {color}]{label}[/]: {escape(value or '')}"

    lines = [
        line(LABEL_ID, record.id),
        line(LABEL_PARENT, record.parent_id),
        line(LABEL_NAME, record.name),
        line(LABEL_TIERS, TIER_SEPARATOR.join(record.tiers)),
    ]
    if record.category.has_extension:
        lines.append(line(LABEL_EXTENSION, record.extension))
    return "\n".join(lines) + "\n"


def list_records(store: RecordStore, record_filter: RecordFilter) -> list[TaxonomyRecord]:
    matches = record_filter.apply(store.records)
    logger.info(
        "Listing %s: %s=%r matched %d of %d records",
        store.category.value,
        record_filter.kind.value,
        record_filter.value,
        len(matches),
        len(store),
    )
    return matches


def render_listing(records: Iterable[TaxonomyRecord]) -> list[str]:
    return [format_record(r) for r in records]
