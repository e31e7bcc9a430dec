"""Text shown around the board while a game is played."""

from tile2048.color import BOLD_OFF, BOLD_ON, DEFAULT, GREEN, RED

MIN_GAME_BOARD_PLAY_SIZE = 3
MAX_GAME_BOARD_PLAY_SIZE = 10
COMPETITION_GAME_BOARD_PLAY_SIZE = 4

_SP = "  "

_TITLE_CARD_2048 = r"""
   /\\\\\\\\\          /\\\\\\\                /\\\         /\\\\\\\\\
  /\\\///////\\\      /\\\/////\\\            /\\\\\       /\\\///////\\\
  \///      \//\\\    /\\\    \//\\\         /\\\/\\\      \/\\\     \/\\\
             /\\\/    \/\\\     \/\\\       /\\\/\/\\\      \///\\\\\\\\\/
           /\\\//      \/\\\     \/\\\     /\\\/  \/\\\       /\\\///////\\\
         /\\\//         \/\\\     \/\\\   /\\\\\\\\\\\\\\\\   /\\\      \//\\\
        /\\\/            \//\\\    /\\\   \///////////\\\//   \//\\\      /\\\
        /\\\\\\\\\\\\\\\   \///\\\\\\\/              \/\\\      \///\\\\\\\\\/
        \///////////////      \///////                \///         \/////////
  """

_SCOREBOARD_SIZE = 27
_OUTER_PADDING = " " * 2
_INNER_PADDING = " " * 1
_VERTICAL_BORDER = "│"
_TOP_BOARD = "┌" + "─" * _SCOREBOARD_SIZE + "┐"
_BOTTOM_BOARD = "└" + "─" * _SCOREBOARD_SIZE + "┘"
_INNER_LENGTH = _SCOREBOARD_SIZE - 2 * len(_INNER_PADDING)


def ascii_art_2048():
    """The game's title card."""
    return f"{GREEN}{BOLD_ON}{_TITLE_CARD_2048}{BOLD_OFF}{DEFAULT}\n\n\n"


def board_input_prompt():
    """Prompt for the board size."""
    return (
        f"{BOLD_ON}{_SP}(NOTE: Scores and statistics will be saved only for the 4x4 gameboard)\n"
        f"{_SP}Enter gameboard size - (Enter '0' to go back): {BOLD_OFF}"
    )


def you_win_prompt():
    """Message for a won game."""
    return f"{GREEN}{BOLD_ON}{_SP}You win! Congratulations!{DEFAULT}{BOLD_OFF}\n\n\n"


def game_over_prompt():
    """Message for a lost game."""
    return f"{RED}{BOLD_ON}{_SP}Game over! You lose.{DEFAULT}{BOLD_OFF}\n\n\n"


def end_of_endless_prompt():
    """Message when endless mode ends."""
    return (
        f"{RED}{BOLD_ON}{_SP}End of endless mode! Thank you for playing!"
        f"{DEFAULT}{BOLD_OFF}\n\n\n"
    )


def question_end_of_winning_game_prompt():
    """Question asked after reaching the winning tile."""
    return (
        f"{GREEN}{BOLD_ON}{_SP}You Won! Continue playing current game? [y/n]"
        f"{DEFAULT}{BOLD_OFF}: "
    )


def game_state_now_saved_prompt():
    """Confirmation that the game was saved."""
    return (
        f"{GREEN}{BOLD_ON}{_SP}The game has been saved. Feel free to take a break."
        f"{DEFAULT}{BOLD_OFF}\n\n"
    )


def game_board_no_save_error_prompt():
    """Notice that no saved game could be loaded."""
    return (
        f"{RED}{BOLD_ON}{_SP}No saved game found. Starting a new game."
        f"{DEFAULT}{BOLD_OFF}\n\n"
    )


def invalid_input_game_board_error_prompt():
    """Notice for an unrecognised key during play."""
    return f"{RED}{_SP}Invalid input. Please try again.{DEFAULT}\n\n"


def board_size_error_prompt():
    """Notice for a board size out of range."""
    return (
        f"{RED}{_SP}Invalid input. Gameboard size should range from "
        f"{MIN_GAME_BOARD_PLAY_SIZE} to {MAX_GAME_BOARD_PLAY_SIZE}.{DEFAULT}\n\n"
    )


def _listing(items):
    return "".join(f"{_SP}{item}\n" for item in items)


def input_command_list_prompt():
    """The list of keys available during play."""
    return _listing(
        ("W => Up", "A => Left", "S => Down", "D => Right", "Z => Save", "M => Return to menu")
    )


def endless_mode_command_list_prompt():
    """The extra key available in endless mode."""
    return _listing(("X => Quit Endless Mode",))


def input_command_list_footer_prompt():
    """The lines below the key list."""
    return _listing(("", "Press the keys to start and continue.", "\n"))


def _scoreboard_row(label, value):
    padding = " " * max(0, _INNER_LENGTH - len(label) - len(value))
    return (
        f"{_OUTER_PADDING}{_VERTICAL_BORDER}{_INNER_PADDING}{BOLD_ON}{label}{BOLD_OFF}"
        f"{padding}{value}{_INNER_PADDING}{_VERTICAL_BORDER}\n"
    )


def game_score_board_box(competition_mode, score, best_score, move_count):
    """Boxed score, best score (competition mode only) and move count."""
    parts = [f"{_OUTER_PADDING}{_TOP_BOARD}\n", _scoreboard_row("SCORE:", str(score))]
    if competition_mode:
        parts.append(_scoreboard_row("BEST SCORE:", str(best_score)))
    parts.append(_scoreboard_row("MOVES:", str(move_count)))
    parts.append(f"{_OUTER_PADDING}{_BOTTOM_BOARD}\n \n")
    return "".join(parts)


def game_score_board_overlay(competition_mode, score, best_score, move_count):
    """The scoreboard shown above the board."""
    return game_score_board_box(competition_mode, score, best_score, move_count)


def game_end_screen_overlay(did_win, endless_mode):
    """The closing message for a finished game."""
    if endless_mode:
        return end_of_endless_prompt()
    return you_win_prompt() if did_win else game_over_prompt()


def game_input_controls_overlay(endless_mode, question_mode):
    """Key help below the board; hidden while the game asks a question."""
    if question_mode:
        return ""
    parts = [input_command_list_prompt()]
    if endless_mode:
        parts.append(endless_mode_command_list_prompt())
    parts.append(input_command_list_footer_prompt())
    return "".join(parts)