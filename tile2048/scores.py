"""High-score records and the scores file."""

import re
from dataclasses import dataclass
from pathlib import Path

_INT = re.compile(r"[+-]?\d+")


@dataclass
class Score:
    """One finished game as kept in the scores file."""

    name: str = ""
    score: int = 0
    win: bool = False
    largest_tile: int = 0
    move_count: int = 0
    duration: float = 0.0

    def serialize(self):
        """Return the record as written to the scores file, leading newline included."""
        return (
            f"\n{self.name} {self.score} {int(self.win)} {self.move_count} "
            f"{self.largest_tile} {format(self.duration, 'g')}"
        )


def _parse_int(token):
    if not _INT.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def _parse_bool(token):
    value = _parse_int(token)
    if value not in (0, 1):
        raise ValueError(f"not a boolean: {token!r}")
    return bool(value)


def parse_scores(text):
    """Read score records in file order, stopping at the first malformed one."""
    tokens = text.split()
    scores = []
    for start in range(0, len(tokens) - 5, 6):
        name, score, win, moves, largest, duration = tokens[start:start + 6]
        try:
            scores.append(
                Score(
                    name=name,
                    score=_parse_int(score),
                    win=_parse_bool(win),
                    move_count=_parse_int(moves),
                    largest_tile=_parse_int(largest),
                    duration=float(duration),
                )
            )
        except ValueError:
            break
    return scores


def load_scores(path):
    """Load scores from ``path``, highest first; raise OSError if unreadable."""
    text = Path(path).read_text()
    return sorted(parse_scores(text), key=lambda s: s.score, reverse=True)


def save_score(score, path):
    """Append one score record to the file at ``path``."""
    with open(path, "a") as handle:
        handle.write(score.serialize())