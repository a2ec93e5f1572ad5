"""Render a ScreenModel with rich: category tabs, filter line, tree rows, scrollbar, detail popup."""

from typing import NamedTuple

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

SCROLL_TRACK = "│"
SCROLL_THUMB = "█"
MARKER_OPEN = "▾ "
MARKER_CLOSED = "▸ "
MARKER_LEAF = "  "
INDENT = "  "


class TabModel(NamedTuple):
    title: str
    color: str
    active: bool


class RowModel(NamedTuple):
    spans: list[tuple[str, bool]]
    depth: int
    has_children: bool
    is_open: bool
    selected: bool


class DetailField(NamedTuple):
    label: str
    value: str


class ScreenModel(NamedTuple):
    """Everything one frame needs; built by the application layer."""

    tabs: list[TabModel]
    filter_text: str
    rows: list[RowModel]
    height: int
    thumb: tuple[int, int]
    status: str
    detail_title: str | None = None
    detail: list[DetailField] | None = None


def _render_tabs(tabs: list[TabModel]) -> Text:
    line = Text()
    for tab in tabs:
        style = f"bold black on {tab.color}" if tab.active else tab.color
        line.append(f" {tab.title} ", style=style)
        line.append(" ")
    return line


def _render_row(row: RowModel, width: int) -> Text:
    if row.has_children:
        marker = MARKER_OPEN if row.is_open else MARKER_CLOSED
    else:
        marker = MARKER_LEAF
    text = Text(INDENT * row.depth + marker, no_wrap=True)
    for chunk, matched in row.spans:
        text.append(chunk, style="bold yellow" if matched else None)
    text.truncate(width, overflow="ellipsis", pad=True)
    if row.selected:
        text.stylize("reverse")
    return text


def _render_scrollbar(height: int, thumb: tuple[int, int]) -> Text:
    start, size = thumb
    cells = [SCROLL_THUMB if start <= i < start + size else SCROLL_TRACK for i in range(height)]
    return Text("\n".join(cells), style="dim")


def _render_detail(title: str, fields: list[DetailField]) -> Panel:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold cyan", no_wrap=True)
    grid.add_column()
    for field in fields:
        grid.add_row(field.label, field.value)
    return Panel(grid, title=title, subtitle="Ctrl-D / Esc to close", border_style="cyan")


def render_screen(model: ScreenModel, *, width: int) -> RenderableType:
    """Compose one frame sized to `width` columns."""
    tree_width = max(10, width - 2)

    if model.detail is not None:
        body: RenderableType = _render_detail(model.detail_title or "", model.detail)
    else:
        lines = [_render_row(r, tree_width) for r in model.rows]
        if not lines:
            lines = [Text("No matching records", style="dim italic")]
        while len(lines) < model.height:
            lines.append(Text(""))
        tree = Text("\n").join(lines)
        body = Table.grid(expand=True)
        body.add_column(ratio=1, no_wrap=True)
        body.add_column(width=1)
        body.add_row(tree, _render_scrollbar(model.height, model.thumb))

    filter_line = Text("Filter: ", style="bold")
    filter_line.append(model.filter_text)
    filter_line.append("▏", style="blink")

    status = Text(model.status, style="dim")
    return Group(_render_tabs(model.tabs), filter_line, Text(""), body, status)
