"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import BrowserConfig
from infrastructure.constants import DATA_DIR, DATA_DIR_ENV

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_browser_config(config_path: Path) -> BrowserConfig:
    """
    Load browser.yaml and construct a fully-resolved BrowserConfig.

    Conventions:
    - A relative data_dir is resolved against the parent of the config
      directory (configs/browser.yaml -> repo root), so the tool works from any cwd.
    - IAB_TAXONOMY_DATA_DIR, when set, replaces data_dir (relative values are
      taken relative to the current working directory).
    """
    raw = _load_yaml(config_path)

    if "categories" not in raw or not isinstance(raw["categories"], dict):
        raise ValueError(f"{config_path} missing required mapping: categories")

    env_dir = os.environ.get(DATA_DIR_ENV, "").strip()
    if env_dir:
        data_dir = Path(env_dir)
        logger.info("Using data_dir from %s: %s", DATA_DIR_ENV, data_dir)
    else:
        data_dir = Path(raw.get("data_dir", str(DATA_DIR)))
        if not data_dir.is_absolute():
            data_dir = config_path.resolve().parent.parent / data_dir

    categories = {str(k).strip().lower(): (v or {}) for k, v in raw["categories"].items()}

    cfg = BrowserConfig(
        data_dir=data_dir,
        page_size=raw.get("page_size", 10),
        start_category=str(raw.get("start_category", "product")).strip().lower(),
        categories=categories,
    )
    logger.debug("Loaded config from %s: data_dir=%s", config_path, cfg.data_dir)
    return cfg
