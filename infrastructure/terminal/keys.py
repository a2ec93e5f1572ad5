"""Keyboard input: read one key with readchar and map it to a browser action."""

from enum import Enum

import readchar


class Action(str, Enum):
    """User intents understood by the interactive browser."""

    NEXT_CATEGORY = "next_category"
    PREVIOUS_CATEGORY = "previous_category"
    BACKSPACE = "backspace"
    DOWN = "down"
    UP = "up"
    LEFT = "left"
    RIGHT = "right"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    TOGGLE = "toggle"
    TOGGLE_DETAIL = "toggle_detail"
    ESCAPE = "escape"
    QUIT = "quit"


CTRL_C = getattr(readchar.key, "CTRL_C", "\x03")
CTRL_D = getattr(readchar.key, "CTRL_D", "\x04")

KEY_BINDINGS: dict[str, Action] = {
    readchar.key.TAB: Action.NEXT_CATEGORY,
    getattr(readchar.key, "SHIFT_TAB", "\x1b[Z"): Action.PREVIOUS_CATEGORY,
    readchar.key.BACKSPACE: Action.BACKSPACE,
    "\x7f": Action.BACKSPACE,
    "\x08": Action.BACKSPACE,
    readchar.key.DOWN: Action.DOWN,
    readchar.key.UP: Action.UP,
    readchar.key.LEFT: Action.LEFT,
    readchar.key.RIGHT: Action.RIGHT,
    readchar.key.PAGE_DOWN: Action.PAGE_DOWN,
    readchar.key.PAGE_UP: Action.PAGE_UP,
    readchar.key.ENTER: Action.TOGGLE,
    "\r": Action.TOGGLE,
    "\n": Action.TOGGLE,
    CTRL_D: Action.TOGGLE_DETAIL,
    readchar.key.ESC: Action.ESCAPE,
    CTRL_C: Action.QUIT,
}


def key_to_action(key: str) -> Action | str | None:
    """
    Translate a raw key.

    Returns:
        An Action for bound keys, the character itself for printable input
        (appended to the filter), or None for anything else
    """
    action = KEY_BINDINGS.get(key)
    if action is not None:
        return action
    if len(key) == 1 and key.isprintable():
        return key
    return None


def read_key() -> str:
    """Block until one key (or escape sequence) is available."""
    return readchar.readkey()
