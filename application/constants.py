"""Application-level constants."""

TOOL_NAME = "iab-taxonomy"
TOOL_VERSION = "0.3.0"
TAXONOMY_SOURCE_URL = "https://github.com/InteractiveAdvertisingBureau/Taxonomies"

# Bundled taxonomy releases, shown by --version
TAXONOMY_VERSIONS = {
    "product": "2.0",
    "content": "3.1",
    "audience": "1.1",
}

# Listing block labels
LABEL_ID = "Unique ID"
LABEL_PARENT = "Parent ID"
LABEL_NAME = "Name"
LABEL_TIERS = "Tiers"
LABEL_EXTENSION = "Extension"
TIER_SEPARATOR = " | "

# rich colour per category, used by listing labels and browser tabs
CATEGORY_COLORS = {
    "product": "yellow",
    "content": "cyan",
    "audience": "red",
}

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
