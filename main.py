"""
CLI entrypoint for the IAB taxonomy browser.

Two modes:
- listing (default): pick exactly one category (--product/--content/--audience)
  and exactly one filter (--id/--parent/--name); print one block per match
- --browse: full-screen tree browser with live filtering and keyboard navigation

Startup loads .env (if present) and configs/browser.yaml, then reads the
taxonomy TSVs. Any data or config error is fatal before output starts.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from application import (
    TaxonomyBrowser,
    UsageError,
    list_records,
    render_listing,
    resolve_category,
    resolve_filter,
)
from application.constants import (
    EXIT_OK,
    EXIT_USAGE,
    TAXONOMY_SOURCE_URL,
    TAXONOMY_VERSIONS,
    TOOL_NAME,
    TOOL_VERSION,
)
from application.session import run_browser
from domain.schemas import Category
from domain.taxonomy.filtering import RecordFilter
from infrastructure.config import BrowserConfig, load_browser_config
from infrastructure.constants import BROWSER_CONFIG_FILE
from infrastructure.io import ensure_exists, load_all_stores, load_record_store
from infrastructure.observability import configure_logging, set_log_context

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _version_string() -> str:
    releases = "".join(f"{c.display_name}: {TAXONOMY_VERSIONS[c.value]}\n" for c in Category)
    return f"{TOOL_NAME} {TOOL_VERSION}\n{releases}\n{TAXONOMY_SOURCE_URL}"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Browse and filter the IAB taxonomies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=_version_string())

    cats = p.add_argument_group("category (exactly one)")
    cats.add_argument("-p", "--product", action="store_true", help="Use the Product taxonomy")
    cats.add_argument("-c", "--content", action="store_true", help="Use the Content taxonomy")
    cats.add_argument("-a", "--audience", action="store_true", help="Use the Audience taxonomy")

    filters = p.add_argument_group("filter (exactly one, listing mode)")
    filters.add_argument("-i", "--id", type=str, default=None, help="Filter by unique ID")
    filters.add_argument(
        "-t", "--parent", type=str, default=None, help="Filter by parent ID (includes the parent itself)"
    )
    filters.add_argument(
        "-n", "--name", type=str, default=None, help="Filter by name (case-insensitive substring match)"
    )

    p.add_argument("--browse", action="store_true", help="Open the interactive tree browser")
    p.add_argument(
        "--config",
        type=str,
        default=str(BROWSER_CONFIG_FILE),
        help="Path to browser.yaml (default: configs/browser.yaml)",
    )
    p.add_argument("--env", type=str, default=".env", help="Optional .env file (default: .env)")
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=LOG_LEVELS,
        help="Console log level (default: WARNING for listing, CRITICAL while browsing)",
    )
    p.add_argument("--log-file", type=str, default=None, help="Write a rotating DEBUG log to this file")
    p.add_argument("--file-level", type=str, default="DEBUG", choices=LOG_LEVELS, help="File log level")
    return p


def _load_config(args: argparse.Namespace) -> BrowserConfig:
    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "browser.yaml")
    return load_browser_config(config_path)


def _listing_console() -> Console:
    # Records print verbatim: no wrapping at the terminal width, no :emoji: codes
    return Console(highlight=False, emoji=False, soft_wrap=True)


def _run_listing(cfg: BrowserConfig, category: Category, record_filter: RecordFilter, console: Console) -> int:
    set_log_context(category=category.value, query=record_filter.value)

    store = load_record_store(cfg, category)
    for block in render_listing(list_records(store, record_filter)):
        console.print(block)
    return EXIT_OK


def _check_browse_args(args: argparse.Namespace) -> None:
    if any(getattr(args, k) is not None for k in ("id", "parent", "name")):
        raise UsageError("--browse takes no --id, --parent or --name; type the filter inside the browser")
    resolve_category(args, default=Category.PRODUCT)


def _run_browser(args: argparse.Namespace, cfg: BrowserConfig) -> int:
    category = resolve_category(args, default=cfg.start_category)

    stores = load_all_stores(cfg)
    browser = TaxonomyBrowser(stores, category=category, page_size=cfg.page_size)
    run_browser(browser)
    return EXIT_OK


def main(argv: list[str] | None = None, *, console: Console | None = None) -> int:
    args = _build_parser().parse_args(argv)

    default_level = "CRITICAL" if args.browse else "WARNING"
    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level or default_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(mode="browse" if args.browse else "list")

    # Selector errors are reported before any config or data is touched
    try:
        if args.browse:
            _check_browse_args(args)
        else:
            category = resolve_category(args)
            record_filter = resolve_filter(args)
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    cfg = _load_config(args)
    if args.browse:
        return _run_browser(args, cfg)
    return _run_listing(cfg, category, record_filter, console or _listing_console())


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
