"""ANSI colour and style modifiers for terminal output."""

from dataclasses import dataclass
from enum import IntEnum


class Code(IntEnum):
    """SGR parameter codes used by the game."""

    BOLD = 1
    RESET = 0
    BG_BLUE = 44
    BG_DEFAULT = 49
    BG_GREEN = 42
    BG_RED = 41
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_YELLOW = 43
    BG_LIGHT_RED = 101
    BG_LIGHT_GREEN = 102
    BG_LIGHT_BLUE = 104
    BG_LIGHT_YELLOW = 103
    FG_BLACK = 30
    FG_BLUE = 34
    FG_CYAN = 36
    FG_DARK_GRAY = 90
    FG_DEFAULT = 39
    FG_GREEN = 32
    FG_LIGHT_BLUE = 94
    FG_LIGHT_CYAN = 96
    FG_LIGHT_GRAY = 37
    FG_LIGHT_GREEN = 92
    FG_LIGHT_MAGENTA = 95
    FG_LIGHT_RED = 91
    FG_LIGHT_YELLOW = 93
    FG_MAGENTA = 35
    FG_RED = 31
    FG_WHITE = 97
    FG_YELLOW = 33


@dataclass(frozen=True)
class Modifier:
    """A single escape sequence that renders as ``ESC[<code>m``."""

    code: Code

    def __str__(self):
        return f"\033[{int(self.code)}m"


BOLD_OFF = Modifier(Code.RESET)
BOLD_ON = Modifier(Code.BOLD)
DEFAULT = Modifier(Code.FG_DEFAULT)
RED = Modifier(Code.FG_RED)
GREEN = Modifier(Code.FG_GREEN)
YELLOW = Modifier(Code.FG_YELLOW)
BLUE = Modifier(Code.FG_BLUE)
MAGENTA = Modifier(Code.FG_MAGENTA)
CYAN = Modifier(Code.FG_CYAN)
LIGHT_GRAY = Modifier(Code.FG_LIGHT_GRAY)
DARK_GRAY = Modifier(Code.FG_DARK_GRAY)
LIGHT_RED = Modifier(Code.FG_LIGHT_RED)
LIGHT_GREEN = Modifier(Code.FG_LIGHT_GREEN)
LIGHT_YELLOW = Modifier(Code.FG_LIGHT_YELLOW)
LIGHT_BLUE = Modifier(Code.FG_LIGHT_BLUE)
LIGHT_MAGENTA = Modifier(Code.FG_LIGHT_MAGENTA)
LIGHT_CYAN = Modifier(Code.FG_LIGHT_CYAN)
FG_WHITE = Modifier(Code.FG_WHITE)
FG_BLACK = Modifier(Code.FG_BLACK)
BG_BLUE = Modifier(Code.BG_BLUE)
BG_GREEN = Modifier(Code.BG_GREEN)
BG_RED = Modifier(Code.BG_RED)
BG_DEFAULT = Modifier(Code.BG_DEFAULT)
BG_2 = Modifier(Code.BG_DEFAULT)
BG_4 = Modifier(Code.BG_GREEN)
BG_8 = Modifier(Code.BG_BLUE)
BG_16 = Modifier(Code.BG_RED)
BG_32 = Modifier(Code.BG_MAGENTA)
BG_64 = Modifier(Code.BG_CYAN)
BG_128 = Modifier(Code.BG_YELLOW)
BG_256 = Modifier(Code.BG_LIGHT_RED)
BG_512 = Modifier(Code.BG_LIGHT_GREEN)
BG_1024 = Modifier(Code.BG_LIGHT_BLUE)
BG_2048 = Modifier(Code.BG_LIGHT_YELLOW)