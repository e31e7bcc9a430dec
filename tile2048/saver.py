"""Writing games in progress to disk."""

from pathlib import Path

from tile2048.console import DataPaths


def format_game_state(board):
    """Return a saved game's text: tile rows, then a ``[score:moves]`` line."""
    return f"{board.state_string()}{board.score}:{board.move_count}]\n"


def save_game_play_state(board, filename, directory=None):
    """Save ``board`` as ``filename`` inside ``directory``, replacing any old save.

    The directory is created when missing. Returns the path written.
    """
    directory = Path(DataPaths().saved_games if directory is None else directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.unlink(missing_ok=True)
    with open(path, "a") as handle:
        handle.write(format_game_state(board))
    return path