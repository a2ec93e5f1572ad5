"""Record source: load each category's TSV into a RecordStore."""

import logging

from domain.schemas import Category
from domain.taxonomy.loader import expected_columns, parse_records
from domain.taxonomy.store import RecordStore
from infrastructure.config.models import BrowserConfig
from infrastructure.io.datasets import read_table

logger = logging.getLogger(__name__)


def load_record_store(cfg: BrowserConfig, category: Category) -> RecordStore:
    """
    Read and validate one category's records.

    Any problem (missing file, unparsable TSV, too few columns, blank id/name,
    duplicate id) raises before the caller starts presenting data.
    """
    source = cfg.categories[category]
    path = cfg.source_path(category)
    df = read_table(path, skip_lines=source.skip_lines)

    n_cols = expected_columns(category)
    if df.shape[1] < n_cols:
        raise ValueError(
            f"{path}: {category.value} taxonomy needs {n_cols} columns, found {df.shape[1]}: {list(df.columns)}"
        )
    if df.shape[1] > n_cols:
        logger.warning(
            "%s: ignoring %d extra column(s): %s",
            path,
            df.shape[1] - n_cols,
            list(df.columns[n_cols:]),
        )

    # short rows come back as NaN
    rows = df.iloc[:, :n_cols].fillna("").itertuples(index=False, name=None)
    store = RecordStore(category, parse_records(rows, category))
    logger.info("Loaded %s taxonomy: %d records from %s", category.value, len(store), path)
    return store


def load_all_stores(cfg: BrowserConfig) -> dict[Category, RecordStore]:
    """Load every category once, in Category order."""
    return {category: load_record_store(cfg, category) for category in Category}
