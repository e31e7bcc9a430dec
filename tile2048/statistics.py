"""Lifetime game statistics and the end-of-game save flow."""

import re
from dataclasses import dataclass, replace
from pathlib import Path

from tile2048.console import seconds_format
from tile2048.scores import save_score
from tile2048.scores_graphics import end_game_statistics_prompt
from tile2048.statistics_graphics import (
    ask_for_player_name_prompt,
    message_score_saved_prompt,
)

_INT = re.compile(r"[+-]?\d+")


@dataclass
class TotalGameStats:
    """Totals over all finished competition games."""

    best_score: int = 0
    total_move_count: int = 0
    game_count: int = 0
    total_duration: float = 0.0
    win_count: int = 0

    def serialize(self):
        """Return the statistics as written to the statistics file."""
        return (
            f"{self.best_score}\n{self.game_count}\n{self.win_count}\n"
            f"{self.total_move_count}\n{format(self.total_duration, 'g')}"
        )


def _parse_int(token):
    if not _INT.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


_FIELDS = (
    ("best_score", _parse_int),
    ("game_count", _parse_int),
    ("win_count", _parse_int),
    ("total_move_count", _parse_int),
    ("total_duration", float),
)


def parse_statistics(text):
    """Read statistics; fields from the first missing or malformed one stay zero."""
    stats = TotalGameStats()
    for (name, parse), token in zip(_FIELDS, text.split()):
        try:
            setattr(stats, name, parse(token))
        except ValueError:
            break
    return stats


def load_statistics(path):
    """Load statistics from ``path``; raise OSError if it cannot be read."""
    return parse_statistics(Path(path).read_text())


def load_best_score(path):
    """The best score on record, or 0 when there are no statistics."""
    try:
        return load_statistics(path).best_score
    except OSError:
        return 0


def save_end_game_stats(score, path):
    """Fold a finished game into the statistics file and return the new totals."""
    try:
        stats = load_statistics(path)
    except OSError:
        stats = TotalGameStats()
    stats.best_score = max(stats.best_score, score.score)
    stats.game_count += 1
    if score.win:
        stats.win_count += 1
    stats.total_move_count += score.move_count
    stats.total_duration += score.duration
    Path(path).write_text(stats.serialize())
    return stats


def create_final_score_and_end_game_data_file(console, score, paths):
    """Show the game's statistics, ask for a name and save score and totals.

    Returns the score with the player's name filled in.
    """
    console.write(
        end_game_statistics_prompt(
            str(score.score),
            str(score.largest_tile),
            str(score.move_count),
            seconds_format(score.duration),
        )
    )
    console.write(ask_for_player_name_prompt())
    named = replace(score, name=console.read_token())
    save_score(named, paths.scores)
    save_end_game_stats(named, paths.statistics)
    console.write(message_score_saved_prompt())
    return named