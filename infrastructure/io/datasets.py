"""Dataset loading utilities."""

import csv
from pathlib import Path

import pandas as pd


def read_table(path: Path, *, skip_lines: int = 0) -> pd.DataFrame:
    """
    Read a tab-separated taxonomy file as strings.

    The column header is the first line after `skip_lines` leading lines.
    Every cell is read as text; empty cells become "" (never NaN).

    Args:
        path: Path to data file (.tsv or .txt)
        skip_lines: Number of lines preceding the column header line

    Returns:
        pandas DataFrame with one string column per source column

    Raises:
        ValueError: If the file format is not supported or the file cannot be parsed
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in [".tsv", ".txt"]:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .tsv, .txt")

    try:
        return pd.read_csv(
            path,
            sep="\t",
            skiprows=skip_lines,
            header=0,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            encoding="utf-8",
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not parse taxonomy file {path}: {e}") from e
