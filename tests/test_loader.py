import pytest

from tile2048.gameboard import GameBoard
from tile2048.loader import (
    count_board_lines,
    load_game,
    load_game_stats,
    load_gameboard,
    parse_tiles,
    read_tile_data,
)
from tile2048.tile import Tile


def _saved_text(board):
    return board.state_string() + f"{board.score}:{board.move_count}]\n"


def _sample_board():
    board = GameBoard.of_size(4)
    board.tiles[0] = Tile(2)
    board.tiles[5] = Tile(8)
    board.tiles[15] = Tile(4, True)
    board.score = 36
    board.move_count = 7
    return board


def test_count_board_lines_stops_at_marker():
    assert count_board_lines(["a", "b", "[x", "c"]) == 2


def test_count_board_lines_without_marker():
    lines = ["1", "2", "3"]
    assert count_board_lines(lines) == len(lines)


def test_read_tile_data_stops_at_marker():
    assert read_tile_data(["2:0,4:1,", "[rest", "8:0,"]) == ["2:0", "4:1"]


def test_read_tile_data_keeps_fields_before_marker_on_same_line():
    assert read_tile_data(["0:0,8:0[junk"]) == ["0:0", "8:0"]


def test_read_tile_data_limits_lines_and_fields():
    lines = [",".join(["1:0"] * 12) + ","] * 12
    fields = read_tile_data(lines)
    assert len(fields) == 10 * 10
    assert set(fields) == {"1:0"}


def test_parse_tiles():
    assert parse_tiles(["2:0", "4:1", ""]) == [Tile(2), Tile(4, True), Tile()]


def test_parse_tiles_rejects_garbage():
    with pytest.raises(ValueError):
        parse_tiles(["x:0"])


def test_load_game_round_trip(tmp_path):
    board = _sample_board()
    path = tmp_path / "save"
    path.write_text(_saved_text(board))
    loaded = load_game(path)
    assert loaded.playsize == board.playsize
    assert loaded.tiles == board.tiles
    assert loaded.score == board.score
    assert loaded.move_count == board.move_count - 1


def test_load_game_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game(tmp_path / "absent")


def test_load_gameboard_reads_tiles(tmp_path):
    board = _sample_board()
    path = tmp_path / "save"
    path.write_text(_saved_text(board))
    loaded = load_gameboard(path)
    assert loaded.playsize == board.playsize
    assert loaded.tiles == board.tiles
    assert loaded.score == GameBoard().score


def test_load_game_stats_uses_last_line(tmp_path):
    path = tmp_path / "stats"
    path.write_text("10:3\n20:5\n")
    assert load_game_stats(path) == (20, 5 - 1)


def test_load_game_stats_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game_stats(tmp_path / "absent")