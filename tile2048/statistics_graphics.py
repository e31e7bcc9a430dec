"""Rendering of the player-name prompt and the total statistics table."""

from tile2048.color import BOLD_OFF, BOLD_ON, DEFAULT, GREEN

_SP = "  "
_DIVIDER = "──────────"
_HEADER_BORDER = "┌────────────────────┬─────────────┐"
_FOOTER_BORDER = "└────────────────────┴─────────────┘"
_LABELS = (
    "Best Score",
    "Game Count",
    "Number of Wins",
    "Total Moves Played",
    "Total Duration",
)
_NO_SAVE_TEXT = "No saved statistics."
_ANY_KEY_EXIT_TEXT = "Press any key to return to the main menu... "


def ask_for_player_name_prompt():
    """Prompt asking for the name to store with a score."""
    return f"{BOLD_ON}{_SP}Please enter your name to save this score: {BOLD_OFF}"


def message_score_saved_prompt():
    """Confirmation shown after a score has been saved."""
    return f"\n{GREEN}{BOLD_ON}{_SP}Score saved!{BOLD_OFF}{DEFAULT}\n"


def total_statistics_overlay(values):
    """Render the lifetime statistics table.

    ``values`` holds five strings (best score, game count, wins, total moves,
    total duration), or is None when no statistics are available.
    """
    parts = []
    if values is not None:
        values = tuple(values)
        if len(values) != len(_LABELS):
            raise ValueError(f"expected {len(_LABELS)} values, got {len(values)}")
        parts.append(f"{GREEN}{BOLD_ON}{_SP}STATISTICS{BOLD_OFF}{DEFAULT}\n")
        parts.append(f"{GREEN}{BOLD_ON}{_SP}{_DIVIDER}{BOLD_OFF}{DEFAULT}\n")
        parts.append(f"{_SP}{_HEADER_BORDER}\n")
        for label, value in zip(_LABELS, values):
            parts.append(
                f"{_SP}│ {BOLD_ON}{label:<18}{BOLD_OFF} │ {value:>11} │\n"
            )
        parts.append(f"{_SP}{_FOOTER_BORDER}\n")
    else:
        parts.append(f"{_SP}{_NO_SAVE_TEXT}\n")
    parts.append("\n\n\n")
    parts.append(f"{_SP}{_ANY_KEY_EXIT_TEXT}")
    return "".join(parts)