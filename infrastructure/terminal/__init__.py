"""
Terminal surface: key input (readchar) and screen rendering (rich).

Rendering consumes a ScreenModel and never touches browser state directly.
"""

from infrastructure.terminal.keys import Action, key_to_action, read_key
from infrastructure.terminal.render import DetailField, RowModel, ScreenModel, TabModel, render_screen

__all__ = [
    "Action",
    "key_to_action",
    "read_key",
    "ScreenModel",
    "RowModel",
    "TabModel",
    "DetailField",
    "render_screen",
]
