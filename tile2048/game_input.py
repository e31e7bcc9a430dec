"""Key bindings that map key presses to tile moves."""

from enum import Enum

CODE_ESC = "\x1b"
CODE_LSQUAREBRACKET = "["

ANSI_TRIGGER_1 = CODE_ESC
ANSI_TRIGGER_2 = CODE_LSQUAREBRACKET

HOTKEY_ACTION_SAVE = "Z"
HOTKEY_ALTERNATE_ACTION_SAVE = "P"
HOTKEY_QUIT_ENDLESS_MODE = "X"
HOTKEY_CHOICE_NO = "N"
HOTKEY_CHOICE_YES = "Y"
HOTKEY_PREGAMEMENU_BACK_TO_MAINMENU = 0
HOTKEY_RETURN_TO_MENU = "M"


class Move(Enum):
    """A direction to tumble the tiles, in the order moves are applied."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


_ANSI_KEYS = {"A": Move.UP, "B": Move.DOWN, "C": Move.RIGHT, "D": Move.LEFT}
_WASD_KEYS = {"W": Move.UP, "A": Move.LEFT, "S": Move.DOWN, "D": Move.RIGHT}
_VIM_KEYS = {"K": Move.UP, "H": Move.LEFT, "J": Move.DOWN, "L": Move.RIGHT}


def check_input_ansi(c, read_key):
    """Decode an arrow-key escape sequence starting with ``c``.

    Further keys of the sequence are pulled from ``read_key``. Returns the
    move, or None when the keys are not an arrow sequence.
    """
    if c != ANSI_TRIGGER_1:
        return None
    c = read_key()
    if c != ANSI_TRIGGER_2:
        return None
    return _ANSI_KEYS.get(read_key())


def check_input_vim(c):
    """Return the move for an H/J/K/L key, or None."""
    return _VIM_KEYS.get(c.upper())


def check_input_wasd(c):
    """Return the move for a W/A/S/D key, or None."""
    return _WASD_KEYS.get(c.upper())