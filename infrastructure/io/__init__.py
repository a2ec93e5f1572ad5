"""I/O utilities: filesystem operations and taxonomy loading."""

from infrastructure.io.datasets import read_table
from infrastructure.io.fs import ensure_exists
from infrastructure.io.taxonomies import load_all_stores, load_record_store

__all__ = [
    "ensure_exists",
    "read_table",
    "load_record_store",
    "load_all_stores",
]
