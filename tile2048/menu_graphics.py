"""Rendering of the main menu."""

from tile2048.color import BLUE, BOLD_OFF, BOLD_ON, DEFAULT, RED

_SP = "  "
_MENU_INDENT = "        "
_MENU_ITEMS = (
    "1. Play a New Game",
    "2. Continue Previous Game",
    "3. View Highscores and Statistics",
    "4. Exit",
)


def main_menu_title_prompt():
    """The menu's welcome line."""
    return f"{BOLD_ON}{_SP}Welcome to {BLUE}2048!{DEFAULT}{BOLD_OFF}\n"


def main_menu_options_prompt():
    """The numbered list of menu choices."""
    items = "".join(f"{_MENU_INDENT}{item}\n" for item in _MENU_ITEMS)
    return f"\n{items}\n"


def input_menu_error_invalid_input_prompt():
    """Message shown after an invalid menu choice."""
    return f"{RED}{_SP}Invalid input. Please try again.{DEFAULT}\n\n"


def input_menu_prompt():
    """The prompt for a menu choice."""
    return f"{_SP}Enter Choice: "


def main_menu_graphics_overlay(input_error):
    """The whole menu, with the error line when the last choice was invalid."""
    parts = [main_menu_title_prompt(), main_menu_options_prompt()]
    if input_error:
        parts.append(input_menu_error_invalid_input_prompt())
    parts.append(input_menu_prompt())
    return "".join(parts)