"""Rendering of the board grid with its tiles."""

from tile2048.gameboard import Point
from tile2048.tile import draw_tile_string

_SP = "  "
_SEPARATOR = "──────"
_BAR_PATTERNS = (("┌", "┬", "┐"), ("├", "┼", "┤"), ("└", "┴", "┘"))


def _bar(playsize, head, mid, tail):
    cells = "".join(
        _SEPARATOR + (mid if column < playsize - 1 else tail) for column in range(playsize)
    )
    return f"{_SP}{head}{cells}\n"


def make_patterned_bars(playsize):
    """Return the top, middle and bottom horizontal borders for the grid."""
    top, middle, base = (_bar(playsize, *pattern) for pattern in _BAR_PATTERNS)
    return top, middle, base


def _row(board, y):
    cells = "".join(
        ("  " if x == 0 else " ") + "│ " + draw_tile_string(board.tile_at(Point(x, y)))
        for x in range(board.playsize)
    )
    return cells + " │\n"


def game_board_text_output(board):
    """Render the board as a bordered grid of coloured tiles."""
    top, middle, base = make_patterned_bars(board.playsize)
    parts = []
    for y in range(board.playsize):
        parts.append(top if y == 0 else middle)
        parts.append(_row(board, y))
    parts.append(base)
    parts.append("\n")
    return "".join(parts)