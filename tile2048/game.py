"""A game in progress: turn logic, input handling and the end-of-game flow."""

import random
import time
from dataclasses import dataclass, replace

from tile2048.console import DataPaths
from tile2048.game_graphics import (
    COMPETITION_GAME_BOARD_PLAY_SIZE,
    ascii_art_2048,
    game_end_screen_overlay,
    game_input_controls_overlay,
    game_score_board_overlay,
    game_state_now_saved_prompt,
    invalid_input_game_board_error_prompt,
    question_end_of_winning_game_prompt,
)
from tile2048.game_input import (
    HOTKEY_ACTION_SAVE,
    HOTKEY_ALTERNATE_ACTION_SAVE,
    HOTKEY_CHOICE_NO,
    HOTKEY_QUIT_ENDLESS_MODE,
    HOTKEY_RETURN_TO_MENU,
    check_input_ansi,
    check_input_vim,
    check_input_wasd,
)
from tile2048.gameboard import GameBoard
from tile2048.gameboard_graphics import game_board_text_output
from tile2048.saver import save_game_play_state
from tile2048.scores import Score
from tile2048.statistics import (
    create_final_score_and_end_game_data_file,
    load_best_score,
)

TILES_REMOVED_ON_RESCUE = 2

REMOVE_TILES_QUESTION = "You lose. Do you want to remove random tiles (Y/N) ?\n"
INVALID_ANSWER_TEXT = "Invalid input.\n"
SAVE_FILENAME_QUESTION = "Please enter the filename to save the game state\n"


@dataclass
class GameStatus:
    """Flags describing where a game session stands."""

    win: bool = False
    end_game: bool = False
    one_shot: bool = False
    saved_game: bool = False
    input_error: bool = False
    endless_mode: bool = False
    asking_question: bool = False
    question_stay_or_quit: bool = False
    tiles_removed: bool = False
    return_to_menu: bool = False


def remove_tiles(board, count=TILES_REMOVED_ON_RESCUE, rng=None):
    """Empty ``count`` randomly chosen occupied tiles of ``board``.

    Returns the indices that were emptied; raises ValueError when fewer
    than ``count`` tiles are occupied.
    """
    rng = random.Random() if rng is None else rng
    occupied = [index for index, tile in enumerate(board.tiles) if tile.value]
    if len(occupied) < count:
        raise ValueError(
            f"cannot remove {count} tiles from a board with {len(occupied)} occupied"
        )
    chosen = rng.sample(occupied, count)
    for index in chosen:
        board.tiles[index] = replace(board.tiles[index], value=0)
    return chosen


def check_input_other(c, status):
    """Handle the save, quit-endless and return-to-menu keys.

    Returns ``(handled, new_status)``; ``handled`` is False for any other key.
    """
    key = c.upper()
    if key in (HOTKEY_ACTION_SAVE, HOTKEY_ALTERNATE_ACTION_SAVE):
        return True, replace(status, one_shot=True, saved_game=True)
    if key == HOTKEY_QUIT_ENDLESS_MODE and status.endless_mode:
        return True, replace(status, end_game=True)
    if key == HOTKEY_RETURN_TO_MENU:
        return True, replace(status, return_to_menu=True)
    return False, status


def update_one_shot_display_flags(status):
    """Clear messages that are shown for a single turn only."""
    if not status.one_shot:
        return status
    return replace(status, one_shot=False, saved_game=False, input_error=False)


def continue_playing_game(console):
    """Ask whether to keep playing; only an answer starting with N stops."""
    answer = console.read_token()
    return answer[0].upper() != HOTKEY_CHOICE_NO


def make_final_score(duration, board):
    """Build the score record for a finished game."""
    return Score(
        score=board.score,
        win=board.win,
        move_count=board.move_count,
        largest_tile=board.largest_tile,
        duration=duration,
    )


class GameSession:
    """One game being played on a board, turn by turn."""

    def __init__(self, console, board, best_score=0, competition_mode=False, paths=None):
        self.console = console
        self.board = board
        self.best_score = best_score
        self.competition_mode = competition_mode
        self.paths = DataPaths() if paths is None else paths
        self.status = GameStatus()
        self.rng = random.Random()

    def process_game_logic(self):
        """Spawn a tile after a move, detect a win, and handle a stuck board."""
        board = self.board
        board.unblock_tiles()
        if board.moved:
            board.add_tile(self.rng)
            board.register_move()

        if not self.status.endless_mode and board.win:
            self.status = replace(
                self.status, win=True, asking_question=True, question_stay_or_quit=True
            )

        if board.can_move():
            return
        if self.status.tiles_removed:
            self.status = replace(self.status, end_game=True)
            return
        self.console.write(REMOVE_TILES_QUESTION)
        answer = self.console.read_token()[0].upper()
        if answer == "Y":
            self.status = replace(self.status, tiles_removed=True)
            remove_tiles(board, rng=self.rng)
        elif answer == HOTKEY_CHOICE_NO:
            self.status = replace(self.status, end_game=True)
        else:
            self.console.write(INVALID_ANSWER_TEXT)

    def receive_input(self):
        """Read one key press and return the move it asks for, if any."""
        if self.status.end_game or self.status.win:
            return None
        c = self.console.read_key()
        move = (
            check_input_ansi(c, self.console.read_key)
            or check_input_wasd(c)
            or check_input_vim(c)
        )
        handled, self.status = check_input_other(c, self.status)
        if move is None and not handled:
            self.status = replace(self.status, one_shot=True, input_error=True)
        return move

    def process_game_status(self):
        """Answer pending questions and saves; return whether to keep looping."""
        loop_again = True
        status = self.status
        if not status.endless_mode and status.win:
            if continue_playing_game(self.console):
                status = replace(
                    status, endless_mode=True, question_stay_or_quit=False, win=False
                )
            else:
                loop_again = False
        if status.end_game:
            loop_again = False
        if status.saved_game:
            self.console.write(SAVE_FILENAME_QUESTION)
            filename = self.console.read_token()
            save_game_play_state(self.board, filename, self.paths.saved_games)
        self.status = replace(status, asking_question=False)
        return loop_again

    def _scoreboard(self):
        board = self.board
        return game_score_board_overlay(
            self.competition_mode,
            board.score,
            max(self.best_score, board.score),
            board.move_count,
        )

    def draw(self):
        """Render the screen shown during a turn."""
        status = self.status
        parts = [ascii_art_2048(), self._scoreboard(), game_board_text_output(self.board)]
        if status.saved_game:
            parts.append(game_state_now_saved_prompt())
        if status.asking_question and status.question_stay_or_quit:
            parts.append(question_end_of_winning_game_prompt())
        parts.append(
            game_input_controls_overlay(status.endless_mode, status.question_stay_or_quit)
        )
        if status.input_error:
            parts.append(invalid_input_game_board_error_prompt())
        return "".join(parts)

    def draw_end(self):
        """Render the screen shown once the game is over."""
        return "".join(
            (
                ascii_art_2048(),
                self._scoreboard(),
                game_board_text_output(self.board),
                game_end_screen_overlay(self.status.win, self.status.endless_mode),
            )
        )

    def play_turn(self):
        """Play one turn; return whether another turn follows."""
        self.process_game_logic()
        self.console.clear()
        self.console.write(self.draw())
        self.status = update_one_shot_display_flags(self.status)
        move = self.receive_input()
        if move is not None:
            self.board.tumble(move)
        return self.process_game_status()

    def run(self):
        """Play turns until the game ends or the player leaves; return the board."""
        while self.play_turn() and not self.status.return_to_menu:
            pass
        self.console.clear()
        self.console.write(self.draw_end())
        return self.board


def play_game(console, board=None, new_game=True, playsize=1, paths=None):
    """Play a new game of ``playsize`` or continue ``board``; return the final board.

    Competition games (4x4, new) record the score and statistics afterwards.
    """
    paths = DataPaths() if paths is None else paths
    competition_mode = playsize == COMPETITION_GAME_BOARD_PLAY_SIZE
    best_score = load_best_score(paths.statistics)

    if new_game:
        board = GameBoard.of_size(playsize)
        board.add_tile()

    session = GameSession(console, board, best_score, competition_mode, paths)
    start = time.perf_counter()
    final_board = session.run()
    duration = time.perf_counter() - start

    if new_game and competition_mode:
        create_final_score_and_end_game_data_file(
            console, make_final_score(duration, final_board), paths
        )
    return final_board