"""Reading saved games from disk."""

import re
from pathlib import Path

from tile2048.gameboard import GameBoard
from tile2048.tile import Tile

MAX_WIDTH = 10
MAX_HEIGHT = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text):
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _split_fields(line, separator):
    parts = line.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def _lines(text):
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def count_board_lines(lines):
    """Count lines before the first one that contains ``[``."""
    count = 0
    for line in lines:
        if "[" in line:
            break
        count += 1
    return count


def read_tile_data(lines):
    """Collect comma-separated tile fields up to the ``[`` end marker.

    At most ten lines, and ten fields on each, are read.
    """
    fields = []
    for _, line in zip(range(MAX_WIDTH), lines):
        marker = line.find("[")
        if marker != -1:
            fields.extend(_split_fields(line[:marker], ",")[:MAX_HEIGHT])
            break
        fields.extend(_split_fields(line, ",")[:MAX_HEIGHT])
    return fields


def _parse_tile(text):
    parts = _split_fields(text, ":")
    value = _to_int(parts[0]) if len(parts) > 0 else 0
    blocked = _to_int(parts[1]) if len(parts) > 1 else 0
    return Tile(value, bool(blocked))


def parse_tiles(fields):
    """Turn ``value:blocked`` fields into tiles; raise ValueError on bad numbers."""
    return [_parse_tile(field) for field in fields]


def _board_from_lines(lines):
    return GameBoard(
        playsize=count_board_lines(lines),
        tiles=parse_tiles(read_tile_data(lines)),
    )


def load_gameboard(path):
    """Load only the tiles of a saved game; raise OSError if unreadable."""
    return _board_from_lines(_lines(Path(path).read_text()))


def load_game_stats(path):
    """Read ``score:moves`` lines and return the last as (score, move_count - 1)."""
    score = 0
    move_count = 0
    for line in _lines(Path(path).read_text()):
        fields = _split_fields(line, ":")
        if len(fields) > 0:
            score = _to_int(fields[0])
        if len(fields) > 1:
            move_count = _to_int(fields[1]) - 1
    return score, move_count


def load_game(path):
    """Load a saved game: tiles, then score and move count from the ``[s:m]`` line."""
    lines = _lines(Path(path).read_text())
    board = _board_from_lines(lines)
    last_line = next((line for line in lines if line.startswith("[")), "")
    colon = last_line.find(":")
    closing = last_line.find("]")
    if last_line and colon != -1 and closing != -1:
        board.score = _to_int(last_line[1:colon])
        board.move_count = _to_int(last_line[colon + 1:closing]) - 1
    return board