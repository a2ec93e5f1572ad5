"""
Configuration management: models, loading, and validation.

Handles:
- BrowserConfig: data directory, paging, start category
- CategorySourceConfig: per-category TSV file and header skipping
- Environment variable override of the data directory

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_browser_config
from infrastructure.config.models import BrowserConfig, CategorySourceConfig

__all__ = [
    "BrowserConfig",
    "CategorySourceConfig",
    "load_browser_config",
]
