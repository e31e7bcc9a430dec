import random

import pytest

from tile2048.game_input import Move
from tile2048.gameboard import WINNING_TILE_VALUE, GameBoard, Point
from tile2048.tile import Tile


def make_board(rows):
    return GameBoard(playsize=len(rows), tiles=[Tile(v) for row in rows for v in row])


def values(board):
    return [
        [board.tile_at(Point(x, y)).value for x in range(board.playsize)]
        for y in range(board.playsize)
    ]


def transpose(rows):
    return [list(col) for col in zip(*rows)]


def random_rows(seed, size=4):
    rng = random.Random(seed)
    return [[rng.choice([0, 0, 2, 4, 8]) for _ in range(size)] for _ in range(size)]


def total(board):
    return sum(tile.value for tile in board.tiles)


def test_point_round_trip():
    p, q = Point(3, -1), Point(5, 7)
    assert (p + q) - q == p
    assert p - p == Point()


def test_of_size_is_empty():
    board = GameBoard.of_size(3)
    assert board.free_tiles() == list(range(9))
    assert all(tile == Tile() for tile in board.tiles)


def test_tile_at_out_of_bounds():
    board = GameBoard.of_size(3)
    with pytest.raises(IndexError):
        board.tile_at(Point(3, 0))
    with pytest.raises(IndexError):
        board.tile_at(Point(0, -1))


def test_add_tile_fills_one_free_tile():
    board = GameBoard.of_size(4)
    assert board.add_tile(random.Random(1)) is True
    placed = [t for t in board.tiles if t.value]
    assert len(placed) == 1
    assert placed[0].value in (2, 4)
    assert len(board.free_tiles()) == 15


def test_add_tile_on_full_board():
    board = make_board([[2, 4], [4, 2]])
    before = list(board.tiles)
    assert board.add_tile(random.Random(0)) is False
    assert board.tiles == before


def test_tumble_left_merges_pair():
    board = make_board([[2, 2, 0], [0, 0, 0], [0, 0, 0]])
    board.tumble_left()
    merged = board.tile_at(Point(0, 0))
    assert merged.value == 4
    assert merged.blocked is True
    assert board.score == merged.value
    assert board.tile_at(Point(1, 0)).value == 0
    assert board.moved is True


def test_no_double_merge_in_one_move():
    board = make_board([[2, 2, 2, 2], [0] * 4, [0] * 4, [0] * 4])
    board.tumble_left()
    assert values(board)[0] == [4, 4, 0, 0]


@pytest.mark.parametrize("seed", range(10))
def test_tumbles_preserve_total(seed):
    for move in Move:
        board = make_board(random_rows(seed))
        before = total(board)
        board.tumble(move)
        assert total(board) == before


@pytest.mark.parametrize("seed", range(10))
def test_right_mirrors_left(seed):
    rows = random_rows(seed)
    left = make_board([list(reversed(r)) for r in rows])
    left.tumble_left()
    right = make_board(rows)
    right.tumble_right()
    assert values(right) == [list(reversed(r)) for r in values(left)]
    assert right.score == left.score


@pytest.mark.parametrize("seed", range(10))
def test_up_and_down_mirror_left_and_right(seed):
    rows = random_rows(seed)
    up = make_board(rows)
    up.tumble_up()
    left = make_board(transpose(rows))
    left.tumble_left()
    assert values(up) == transpose(values(left))
    down = make_board(rows)
    down.tumble_down()
    right = make_board(transpose(rows))
    right.tumble_right()
    assert values(down) == transpose(values(right))
    assert down.score == right.score


def test_tumble_dispatch_matches_direct_call():
    rows = random_rows(42)
    a = make_board(rows)
    a.tumble(Move.UP)
    b = make_board(rows)
    b.tumble_up()
    assert a == b


def test_nothing_moves_leaves_moved_flag():
    board = make_board([[2, 4], [4, 2]])
    board.moved = False
    board.tumble_left()
    assert board.moved is False
    assert board.score == 0


def test_win_and_largest_tile():
    half = WINNING_TILE_VALUE // 2
    board = make_board([[half, half], [0, 0]])
    board.tumble_left()
    assert board.win is True
    assert board.largest_tile == WINNING_TILE_VALUE


def test_can_move():
    assert GameBoard.of_size(3).can_move() is True
    assert make_board([[2, 4], [4, 2]]).can_move() is False
    assert make_board([[2, 2], [4, 8]]).can_move() is True
    assert make_board([[2, 4], [2, 8]]).can_move() is True


def test_unblock_tiles():
    board = make_board([[2, 2], [0, 0]])
    board.tumble_left()
    assert any(t.blocked for t in board.tiles)
    board.unblock_tiles()
    assert not any(t.blocked for t in board.tiles)
    assert total(board) == 4


def test_register_move():
    board = GameBoard.of_size(3)
    before = board.move_count
    board.register_move()
    assert board.move_count == before + 1
    assert board.moved is False


def test_state_string():
    board = make_board([[2, 0], [0, 4]])
    assert board.state_string() == "2:0,0:0,\n0:0,4:0,\n["


def test_state_string_marks_blocked():
    board = make_board([[2, 2], [0, 0]])
    board.tumble_left()
    lines = board.state_string().split("\n")
    assert lines[-1] == "["
    assert lines[0].startswith(f"{board.tile_at(Point(0, 0)).value}:1,")