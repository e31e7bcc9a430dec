"""The main menu and the command that starts the game."""

import argparse
import re
import sys
from enum import Enum
from pathlib import Path

from tile2048.console import Console, DataPaths, seconds_format
from tile2048.game_graphics import ascii_art_2048
from tile2048.menu_graphics import main_menu_graphics_overlay
from tile2048.pregame import continue_old_game, set_up_new_game
from tile2048.scores import load_scores
from tile2048.scores_graphics import scoreboard_overlay
from tile2048.statistics import load_statistics
from tile2048.statistics_graphics import total_statistics_overlay

_LEADING_UNSIGNED = re.compile(r"\s*\+?(\d+)")


class MenuChoice(Enum):
    """The entries of the main menu, keyed by the character that picks them."""

    START_GAME = "1"
    CONTINUE_GAME = "2"
    DISPLAY_HIGHSCORES = "3"
    EXIT_GAME = "4"


def parse_menu_choice(c):
    """Return the menu entry for ``c``, or None for anything else."""
    try:
        return MenuChoice(c)
    except ValueError:
        return None


def list_saved_game_states(console, directory):
    """Names of the regular files in ``directory``, sorted."""
    directory = Path(directory)
    if not directory.exists():
        console.write("Directory does not exists.\n")
        return []
    return sorted(entry.name for entry in directory.iterdir() if entry.is_file())


def choose_game_state(console, states):
    """Let the player pick one of ``states``; return "" when none is chosen."""
    if not states:
        console.write("No saved games found.\n")
        return ""
    listing = "".join(f"{number}. {name}\n" for number, name in enumerate(states, 1))
    console.write(f"Saved games are:\n{listing}Choose game state:\n\n")
    match = _LEADING_UNSIGNED.match(console.read_token())
    index = int(match.group(1)) if match else 0
    if not 1 <= index <= len(states):
        console.write("Invalid choice.\n")
        return ""
    return states[index - 1]


def make_scoreboard_display_rows(scores):
    """Turn scores into numbered rows of display strings."""
    return [
        (
            str(number),
            score.name,
            str(score.score),
            "Yes" if score.win else "No",
            str(score.move_count),
            str(score.largest_tile),
            seconds_format(score.duration),
        )
        for number, score in enumerate(scores, 1)
    ]


def make_total_stats_display(stats):
    """Display strings for the lifetime statistics, or None when there are none."""
    if stats is None:
        return None
    return (
        str(stats.best_score),
        str(stats.game_count),
        str(stats.win_count),
        str(stats.total_move_count),
        seconds_format(stats.total_duration),
    )


def show_scores(console, paths=None):
    """Show the scoreboard and statistics, then wait for a key."""
    paths = DataPaths() if paths is None else paths
    try:
        scores = load_scores(paths.scores)
    except OSError:
        scores = []
    try:
        stats = load_statistics(paths.statistics)
    except OSError:
        stats = None
    console.clear()
    console.write(ascii_art_2048())
    console.write(scoreboard_overlay(make_scoreboard_display_rows(scores)))
    console.write(total_statistics_overlay(make_total_stats_display(stats)))
    console.pause_for_keypress()


def continue_game(console, paths=None):
    """Pick a saved game and continue it."""
    paths = DataPaths() if paths is None else paths
    directory = Path(paths.saved_games)
    chosen = choose_game_state(console, list_saved_game_states(console, directory))
    if chosen:
        continue_old_game(console, str(directory / chosen), paths)
    else:
        console.write("The file is empty\n")


def start_menu(console, paths=None):
    """Run the main menu until the player chooses to exit."""
    paths = DataPaths() if paths is None else paths
    input_error = False
    while True:
        console.clear()
        console.write(ascii_art_2048())
        console.write(main_menu_graphics_overlay(input_error))
        choice = parse_menu_choice(console.read_token()[0])
        input_error = choice is None
        if choice is MenuChoice.START_GAME:
            set_up_new_game(console, paths)
        elif choice is MenuChoice.CONTINUE_GAME:
            continue_game(console, paths)
        elif choice is MenuChoice.DISPLAY_HIGHSCORES:
            show_scores(console, paths)
        elif choice is MenuChoice.EXIT_GAME:
            return


def main(argv=None):
    """Start the game at the main menu."""
    parser = argparse.ArgumentParser(prog="tile2048", description="Play 2048 in the terminal.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory holding scores, statistics and saved games",
    )
    args = parser.parse_args(argv)
    paths = DataPaths() if args.data_dir is None else DataPaths.under(args.data_dir)
    console = Console()
    try:
        start_menu(console, paths)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())