"""The game board: tile storage, moves, merges and tile spawning."""

import random
from dataclasses import dataclass, field, replace

from tile2048.game_input import Move
from tile2048.tile import Tile

WINNING_TILE_VALUE = 2048
CHANCE_OF_VALUE_FOUR_OVER_TWO = 89  # percentage threshold


@dataclass(frozen=True)
class Point:
    """A board coordinate; x is the column and y the row."""

    x: int = 0
    y: int = 0

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)


_UP = Point(0, -1)
_DOWN = Point(0, 1)
_LEFT = Point(-1, 0)
_RIGHT = Point(1, 0)


@dataclass
class GameBoard:
    """A square board of tiles stored row by row, with the game's running totals."""

    playsize: int = 0
    tiles: list = field(default_factory=list)
    win: bool = False
    moved: bool = True
    score: int = 0
    largest_tile: int = 2
    move_count: int = -1

    @classmethod
    def of_size(cls, playsize):
        """Create an empty board with ``playsize`` rows and columns."""
        return cls(playsize=playsize, tiles=[Tile() for _ in range(playsize * playsize)])

    def _in_bounds(self, point):
        return 0 <= point.x < self.playsize and 0 <= point.y < self.playsize

    def _index(self, point):
        return point.x + self.playsize * point.y

    def tile_at(self, point):
        """Return the tile at ``point``; raise IndexError outside the board."""
        if not self._in_bounds(point):
            raise IndexError(f"point {point} is outside a {self.playsize}x{self.playsize} board")
        return self.tiles[self._index(point)]

    def _set(self, point, tile):
        self.tiles[self._index(point)] = tile

    def free_tiles(self):
        """Indices of the empty tiles, in board order."""
        return [index for index, tile in enumerate(self.tiles) if not tile.value]

    def unblock_tiles(self):
        """Clear the merged-this-turn mark on every tile."""
        self.tiles = [replace(tile, blocked=False) for tile in self.tiles]

    def can_move(self):
        """Whether any tile is empty or has an equal neighbour."""
        for index, tile in enumerate(self.tiles):
            if tile.value == 0:
                return True
            point = Point(index % self.playsize, index // self.playsize)
            for offset in (Point(1, 0), Point(0, 1)):
                neighbour = next(
                    (p for p in (point + offset, point - offset) if self._in_bounds(p)),
                    None,
                )
                if neighbour is not None and self.tile_at(neighbour).value == tile.value:
                    return True
        return False

    def add_tile(self, rng=None):
        """Put a 2 (or, one time in ten, a 4) on a random empty tile.

        Returns True when a tile was placed and False when the board is full.
        """
        rng = random.Random() if rng is None else rng
        free = self.free_tiles()
        if not free:
            return False
        index = free[rng.randrange(len(free))]
        value = 4 if rng.randrange(100) > CHANCE_OF_VALUE_FOUR_OVER_TWO else 2
        point = Point(index % self.playsize, index // self.playsize)
        self._set(point, replace(self.tile_at(point), value=value))
        return True

    def register_move(self):
        """Count one more move and clear the moved flag."""
        self.move_count += 1
        self.moved = False

    def _record_merge(self, value):
        self.score += value
        self.largest_tile = max(self.largest_tile, value)
        if not self.win and value == WINNING_TILE_VALUE:
            self.win = True

    def _step(self, point, offset):
        target_point = point + offset
        current = self.tile_at(point)
        target = self.tile_at(target_point)
        if (
            target.value
            and current.value == target.value
            and not current.blocked
            and not target.blocked
        ):
            merged = target.value * 2
            self._set(point, replace(current, value=0))
            self._set(target_point, Tile(merged, True))
            self.moved = True
            self._record_merge(merged)
        elif current.value and not target.value:
            self._set(target_point, replace(target, value=current.value))
            self._set(point, replace(current, value=0))
            self.moved = True

    def _continues(self, point, offset):
        direction = offset.x + offset.y
        if direction == 1:
            return (point.y if offset.y == 1 else point.x) < self.playsize - 2
        if direction == -1:
            return (point.y if offset.y == -1 else point.x) > 1
        return False

    def _slide(self, point, offset):
        while True:
            self._step(point, offset)
            if not self._continues(point, offset):
                return
            point = point + offset

    def _slide_if_occupied(self, point, offset):
        if self.tile_at(point).value:
            self._slide(point, offset)

    def tumble(self, move):
        """Tumble all tiles in the direction of ``move``."""
        {
            Move.UP: self.tumble_up,
            Move.DOWN: self.tumble_down,
            Move.LEFT: self.tumble_left,
            Move.RIGHT: self.tumble_right,
        }[move]()

    def tumble_up(self):
        """Slide and merge tiles towards the top row."""
        for x in range(self.playsize):
            for y in range(1, self.playsize):
                self._slide_if_occupied(Point(x, y), _UP)

    def tumble_down(self):
        """Slide and merge tiles towards the bottom row."""
        for x in range(self.playsize):
            for y in range(self.playsize - 2, -1, -1):
                self._slide_if_occupied(Point(x, y), _DOWN)

    def tumble_left(self):
        """Slide and merge tiles towards the left column."""
        for y in range(self.playsize):
            for x in range(1, self.playsize):
                self._slide_if_occupied(Point(x, y), _LEFT)

    def tumble_right(self):
        """Slide and merge tiles towards the right column."""
        for y in range(self.playsize):
            for x in range(self.playsize - 2, -1, -1):
                self._slide_if_occupied(Point(x, y), _RIGHT)

    def state_string(self):
        """Serialise the tiles as ``value:blocked,`` rows terminated by ``[``."""
        rows = (
            "".join(
                f"{tile.value}:{int(tile.blocked)},"
                for tile in (self.tile_at(Point(x, y)) for x in range(self.playsize))
            )
            + "\n"
            for y in range(self.playsize)
        )
        return "".join(rows) + "["