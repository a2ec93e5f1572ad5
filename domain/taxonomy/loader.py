"""Parse pre-loaded tabular rows into taxonomy records."""

import logging
from collections.abc import Iterable, Sequence

from pydantic import ValidationError

from domain.schemas import Category, TaxonomyRecord

logger = logging.getLogger(__name__)


def expected_columns(category: Category) -> int:
    """Number of positional columns a category's source must provide."""
    return 3 + category.tier_count + (1 if category.has_extension else 0)


def parse_records(rows: Iterable[Sequence[object]], category: Category) -> list[TaxonomyRecord]:
    """
    Convert raw rows into TaxonomyRecord objects.

    This is a pure function - it does NOT perform file I/O.
    Reading the TSV happens in infrastructure.io.taxonomies.

    Columns are interpreted by position:
    id, parent id, name, tier 1..N, then extension (content and audience only).

    Args:
        rows: Row sequences in source order (header already consumed)
        category: Category the rows belong to

    Returns:
        Records in source order

    Raises:
        ValueError: If a row is short, or id/name is blank
    """
    n_cols = expected_columns(category)
    n_tiers = category.tier_count
    records: list[TaxonomyRecord] = []

    for line_no, row in enumerate(rows, start=1):
        cells = ["" if c is None else str(c) for c in row]
        if len(cells) < n_cols:
            raise ValueError(
                f"{category.value} row {line_no}: expected {n_cols} columns, got {len(cells)}"
            )
        if not any(c.strip() for c in cells):
            logger.debug("%s row %d is blank; skipping", category.value, line_no)
            continue

        ext = cells[3 + n_tiers] if category.has_extension else None
        try:
            record = TaxonomyRecord(
                id=cells[0],
                parent_id=cells[1],
                name=cells[2],
                tiers=cells[3 : 3 + n_tiers],
                extension=ext,
                category=category,
            )
        except ValidationError as e:
            raise ValueError(f"{category.value} row {line_no}: invalid record {cells[:3]!r}") from e
        records.append(record)

    return records
