from pathlib import Path

# Repo-root conventional directories/files (overrideable via browser.yaml / environment)
CONFIG_DIR = Path("configs")
BROWSER_CONFIG_FILE = CONFIG_DIR / "browser.yaml"

DATA_DIR = Path("dataset")
LOG_DIR = Path("logs")

# Environment variable that replaces data_dir from browser.yaml
DATA_DIR_ENV = "IAB_TAXONOMY_DATA_DIR"
