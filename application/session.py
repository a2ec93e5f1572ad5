"""Interactive session loop: read a key, apply it, render the consistent result."""

import logging

from rich.console import Console
from rich.live import Live

from application.browser import TaxonomyBrowser
from application.constants import CATEGORY_COLORS, LABEL_EXTENSION, LABEL_ID, LABEL_NAME, LABEL_PARENT
from application.viewport import calculate_visible_range, scrollbar_thumb
from domain.taxonomy.highlight import split_highlight
from infrastructure.terminal import (
    Action,
    DetailField,
    RowModel,
    ScreenModel,
    TabModel,
    key_to_action,
    read_key,
    render_screen,
)

logger = logging.getLogger(__name__)

# tabs, filter line, spacer, status
RESERVED_LINES = 4
KEY_HINTS = "Tab category · type to filter · ←↑↓→ PgUp/PgDn move · Enter expand · Ctrl-D details · Esc quit"


def build_detail(browser: TaxonomyBrowser) -> list[DetailField] | None:
    record = browser.selected_record()
    if record is None:
        return None
    fields = [
        DetailField(LABEL_ID, record.id),
        DetailField(LABEL_PARENT, record.parent_id or ""),
        DetailField(LABEL_NAME, record.name),
    ]
    fields.extend(DetailField(f"Tier {i}", tier) for i, tier in enumerate(record.tiers, start=1))
    if record.category.has_extension:
        fields.append(DetailField(LABEL_EXTENSION, record.extension or ""))
    return fields


def build_screen(browser: TaxonomyBrowser, height: int, offset: int) -> tuple[ScreenModel, int]:
    """
    Build the frame for the current browser state.

    Args:
        browser: Session state
        height: Tree rows available on screen
        offset: Previous scroll offset

    Returns:
        (ScreenModel, new scroll offset)
    """
    view = browser.view
    rows = view.visible_rows()
    total = len(rows)
    cursor = view.selected_index()
    start, end, offset = calculate_visible_range(cursor or 0, total, height, offset)

    row_models = [
        RowModel(
            spans=split_highlight(r.node.label, browser.filter_text),
            depth=r.depth,
            has_children=r.node.has_children,
            is_open=r.is_open,
            selected=(r.path == view.selection),
        )
        for r in rows[start:end]
    ]

    tabs = [
        TabModel(c.display_name, CATEGORY_COLORS[c.value], c is browser.category)
        for c in browser.categories
    ]

    position = f"{cursor + 1}/{total}" if cursor is not None else f"0/{total}"
    status = f"{position}  ·  {len(browser.store)} {browser.category.value} records  ·  {KEY_HINTS}"

    detail = build_detail(browser) if browser.detail_open else None
    record = browser.selected_record()
    model = ScreenModel(
        tabs=tabs,
        filter_text=browser.filter_text,
        rows=row_models,
        height=height,
        thumb=scrollbar_thumb(total, offset, height),
        status=status,
        detail_title=record.label if (detail is not None and record is not None) else None,
        detail=detail,
    )
    return model, offset


def apply_key(browser: TaxonomyBrowser, key: str) -> None:
    """Apply one raw key to the browser."""
    action = key_to_action(key)
    if action is None:
        logger.debug("Ignoring unbound key %r", key)
        return
    if isinstance(action, Action):
        browser.dispatch(action)
    else:
        browser.append_filter(action)


def run_browser(browser: TaxonomyBrowser, *, console: Console | None = None) -> None:
    """Run the full-screen browser until the user quits."""
    console = console or Console(highlight=False)
    offset = 0
    logger.info("Interactive session started (%s)", browser.category.value)

    with Live(console=console, screen=True, auto_refresh=False) as live:
        while browser.running:
            height = max(1, console.size.height - RESERVED_LINES)
            model, offset = build_screen(browser, height, offset)
            live.update(render_screen(model, width=console.size.width), refresh=True)
            try:
                key = read_key()
            except KeyboardInterrupt:
                browser.quit()
                break
            apply_key(browser, key)

    logger.info("Interactive session ended")
