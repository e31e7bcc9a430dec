"""The 2048 sliding-tile puzzle for the terminal, with saved games, high scores and statistics."""

__version__ = "0.1.0"