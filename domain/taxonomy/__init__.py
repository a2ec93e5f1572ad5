"""
Taxonomy hierarchy engine: records, tree building, filtering and navigation.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.filtering import FilterKind, RecordFilter, filter_records, matches_query
from domain.taxonomy.highlight import split_highlight
from domain.taxonomy.loader import expected_columns, parse_records
from domain.taxonomy.store import RecordStore
from domain.taxonomy.tree import build_forest, iter_paths
from domain.taxonomy.view import TreeView, VisibleRow

__all__ = [
    "RecordStore",
    "parse_records",
    "expected_columns",
    "build_forest",
    "iter_paths",
    "filter_records",
    "matches_query",
    "FilterKind",
    "RecordFilter",
    "TreeView",
    "VisibleRow",
    "split_highlight",
]
