"""Board tiles and their terminal rendering."""

from dataclasses import dataclass

from tile2048 import color

TILE_WIDTH = 4

_BG_COLORS = {
    2: color.BG_2,
    4: color.BG_4,
    8: color.BG_8,
    16: color.BG_16,
    32: color.BG_32,
    64: color.BG_64,
    128: color.BG_128,
    256: color.BG_256,
    512: color.BG_512,
    1024: color.BG_1024,
    2048: color.BG_2048,
}


@dataclass(frozen=True)
class Tile:
    """A board cell: its value (0 when empty) and whether it merged this turn."""

    value: int = 0
    blocked: bool = False


def center_string(text, width):
    """Pad text with spaces to ``width``, extra space going to the right."""
    if width <= len(text):
        return text
    pad_left = (width - len(text)) // 2
    pad_right = width - len(text) - pad_left
    return " " * pad_left + text + " " * pad_right


def tile_bg_color(value):
    """Background colour for a tile value."""
    return _BG_COLORS.get(value, color.BG_DEFAULT)


def tile_fg_color(value):
    """Foreground colour for a tile value."""
    return color.FG_BLACK if value in (2, 4) else color.FG_WHITE


def draw_tile_string(tile):
    """Render a tile as a coloured, centred cell four characters wide."""
    if not tile.value:
        return " " * TILE_WIDTH
    return (
        f"{tile_bg_color(tile.value)}{tile_fg_color(tile.value)}{color.BOLD_ON}"
        f"{center_string(str(tile.value), TILE_WIDTH)}{color.BOLD_OFF}{color.DEFAULT}"
    )