"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Taxonomy TSV loading (pandas)
- Observability (logging)
- Terminal input and rendering (readchar, rich)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import BrowserConfig, load_browser_config
from infrastructure.io import load_all_stores, load_record_store

__all__ = [
    # Configuration
    "load_browser_config",
    "BrowserConfig",
    # Record source
    "load_record_store",
    "load_all_stores",
]
