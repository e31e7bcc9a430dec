"""Rendering of the scoreboard table and the end-of-game statistics."""

from tile2048.color import BOLD_OFF, BOLD_ON, DEFAULT, GREEN, YELLOW

_SP = "  "
_DIVIDER = "──────────"
_HEADER_BORDER = (
    "┌─────┬────────────────────┬──────────┬──────┬───────┬──────────────┬──────────────┐"
)
_MID_BORDER = (
    "├─────┼────────────────────┼──────────┼──────┼───────┼──────────────┼──────────────┤"
)
_BOTTOM_BORDER = (
    "└─────┴────────────────────┴──────────┴──────┴───────┴──────────────┴──────────────┘"
)


def _bold(text):
    return f"{BOLD_ON}{text}{BOLD_OFF}"


def scoreboard_overlay(rows):
    """Render the scoreboard.

    ``rows`` holds 7-tuples of strings: number, name, score, won, moves,
    largest tile and duration.
    """
    parts = [
        f"{GREEN}{BOLD_ON}{_SP}SCOREBOARD{BOLD_OFF}{DEFAULT}\n",
        f"{GREEN}{BOLD_ON}{_SP}{_DIVIDER}{BOLD_OFF}{DEFAULT}\n",
    ]
    if rows:
        parts.append(f"{_SP}{_HEADER_BORDER}\n")
        header_cells = [
            _bold("No."),
            _bold(f"{'Name':<18}"),
            _bold(f"{'Score':<8}"),
            _bold("Won?"),
            _bold("Moves"),
            _bold("Largest Tile"),
            _bold(f"{'Duration':<12}"),
        ]
        parts.append(f"{_SP}│ " + " │ ".join(header_cells) + " │\n")
        parts.append(f"{_SP}{_MID_BORDER}\n")
        for number, name, score, won, moves, largest, duration in rows:
            parts.append(
                f"{_SP}│ {number:>2}. │ {name:<18} │ {score:>8} │ {won:>4} │ "
                f"{moves:>5} │ {largest:>12} │ {duration:>12} │\n"
            )
        parts.append(f"{_SP}{_BOTTOM_BORDER}\n")
    else:
        parts.append(f"{_SP}No saved scores.\n")
    parts.append("\n\n")
    return "".join(parts)


def end_game_statistics_prompt(score, largest_tile, move_count, duration):
    """Render the statistics shown after a competition game."""
    labels_and_values = [
        ("Final score:", score),
        ("Largest Tile:", largest_tile),
        ("Number of moves:", move_count),
        ("Time taken:", duration),
    ]
    parts = [
        f"{YELLOW}{_SP}STATISTICS{DEFAULT}\n",
        f"{YELLOW}{_SP}{_DIVIDER}{DEFAULT}\n",
    ]
    for label, value in labels_and_values:
        parts.append(f"{_SP}{label:<19}{BOLD_ON}{value}{BOLD_OFF}\n")
    parts.append("\n\n")
    return "".join(parts)