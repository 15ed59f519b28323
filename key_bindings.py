import curses
from enum import Enum, auto
from typing import Optional

from app_state import EditRow, EditTable, Select


class Command(Enum):
    UP = auto()
    DOWN = auto()
    OPEN = auto()
    ESCAPE = auto()
    QUIT = auto()
    SAVE = auto()
    SELECT_ROW = auto()
    DESELECT_ROW = auto()
    PASTE = auto()
    DELETE = auto()
    ADD_ROW = auto()
    REINFER = auto()
    NEXT_FIELD = auto()
    PREV_FIELD = auto()


KEY_ESC = 27
KEY_CTRL_R = 18
KEY_CTRL_S = 19
KEY_CTRL_V = 22
KEY_TAB = 9

_ENTER_KEYS = (10, 13, curses.KEY_ENTER)

SELECT_KEYS = {
    curses.KEY_UP: Command.UP,
    ord("k"): Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    ord("j"): Command.DOWN,
    ord("q"): Command.QUIT,
    KEY_CTRL_S: Command.SAVE,
    **{k: Command.OPEN for k in _ENTER_KEYS},
}

EDIT_TABLE_KEYS = {
    curses.KEY_UP: Command.UP,
    ord("k"): Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    ord("j"): Command.DOWN,
    KEY_ESC: Command.ESCAPE,
    curses.KEY_RIGHT: Command.SELECT_ROW,
    ord("l"): Command.SELECT_ROW,
    curses.KEY_LEFT: Command.DESELECT_ROW,
    ord("h"): Command.DESELECT_ROW,
    KEY_CTRL_V: Command.PASTE,
    curses.KEY_DC: Command.DELETE,
    ord("x"): Command.DELETE,
    ord("a"): Command.ADD_ROW,
    KEY_CTRL_R: Command.REINFER,
    **{k: Command.OPEN for k in _ENTER_KEYS},
}

EDIT_ROW_KEYS = {
    KEY_ESC: Command.ESCAPE,
    KEY_CTRL_S: Command.SAVE,
    KEY_TAB: Command.NEXT_FIELD,
    curses.KEY_BTAB: Command.PREV_FIELD,
}


def command_for_key(ch: int, state) -> Optional[Command]:
    """Map a key to a command for the active screen; None means raw input."""
    if isinstance(state, Select):
        return SELECT_KEYS.get(ch)
    if isinstance(state, EditTable):
        return EDIT_TABLE_KEYS.get(ch)
    if isinstance(state, EditRow):
        return EDIT_ROW_KEYS.get(ch)
    return None
