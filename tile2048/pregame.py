"""Setting up a game before play: board size choice and loading saved games."""

import re

from tile2048.console import DataPaths
from tile2048.game import play_game
from tile2048.game_graphics import (
    MAX_GAME_BOARD_PLAY_SIZE,
    MIN_GAME_BOARD_PLAY_SIZE,
    ascii_art_2048,
    board_input_prompt,
    board_size_error_prompt,
    game_board_no_save_error_prompt,
)
from tile2048.game_input import HOTKEY_PREGAMEMENU_BACK_TO_MAINMENU
from tile2048.loader import load_game

INVALID_PLAY_SIZE = -1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_play_size(token):
    """Read the leading integer of ``token``; return -1 when there is none."""
    match = _LEADING_INT.match(token)
    if match is None:
        return INVALID_PLAY_SIZE
    return int(match.group(1))


def board_size_prompt(invalid):
    """The board size question, preceded by an error line after a bad answer."""
    error = board_size_error_prompt() if invalid else ""
    return error + board_input_prompt()


def set_up_new_game(console, paths=None, no_save=False):
    """Ask for a board size and play a new game on it.

    Entering 0 goes back without playing and returns None; otherwise the
    final board of the game is returned. ``no_save`` shows, once, the notice
    that no saved game could be loaded.
    """
    paths = DataPaths() if paths is None else paths
    invalid = False
    while True:
        console.clear()
        console.write(ascii_art_2048())
        if no_save:
            console.write(game_board_no_save_error_prompt())
            no_save = False
        console.write(board_size_prompt(invalid))
        size = parse_play_size(console.read_token())
        if MIN_GAME_BOARD_PLAY_SIZE <= size <= MAX_GAME_BOARD_PLAY_SIZE:
            return play_game(console, new_game=True, playsize=size, paths=paths)
        if size == HOTKEY_PREGAMEMENU_BACK_TO_MAINMENU:
            return None
        invalid = True


def continue_old_game(console, filename, paths=None):
    """Continue the game saved in ``filename``, or start a new one if it cannot be read."""
    paths = DataPaths() if paths is None else paths
    try:
        board = load_game(filename)
    except OSError:
        return set_up_new_game(console, paths, no_save=True)
    return play_game(console, board, new_game=False, paths=paths)