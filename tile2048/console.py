"""Terminal input and output helpers, and the on-disk data locations."""

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

try:
    import termios
except ImportError:  # pragma: no cover - not available on Windows
    termios = None

try:
    import msvcrt
except ImportError:  # pragma: no cover - only available on Windows
    msvcrt = None


@dataclass(frozen=True)
class DataPaths:
    """Where scores, statistics and saved games are kept."""

    scores: Path = Path("../data/scores.txt")
    statistics: Path = Path("../data/statistics.txt")
    saved_games: Path = Path("../data/SavedGameFiles")

    @classmethod
    def under(cls, root):
        """Build the standard layout below the directory ``root``."""
        root = Path(root)
        return cls(
            scores=root / "scores.txt",
            statistics=root / "statistics.txt",
            saved_games=root / "SavedGameFiles",
        )


def _read_char(stream):
    ch = stream.read(1)
    if not ch:
        raise EOFError("end of input")
    return ch


def get_keypress():
    """Read one key from the terminal without waiting for Enter."""
    stream = sys.stdin
    if not stream.isatty():
        return _read_char(stream)
    if msvcrt is not None:
        return msvcrt.getwch()
    if termios is None:
        return _read_char(stream)
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    if not data:
        raise EOFError("end of input")
    return data.decode("latin-1")


def clear_screen():
    """Clear the terminal using the platform's clear command."""
    if os.name == "nt":
        command = "cls"
        shell = True
    else:
        command = ["clear"]
        shell = False
    try:
        subprocess.run(command, shell=shell, check=False)
    except OSError:
        pass


def seconds_format(seconds):
    """Format a duration as ``[Hh ][Mm ]Ss`` with whole seconds."""
    s = float(seconds)
    m = int(s / 60)
    s -= m * 60
    h = int(m / 60)
    m -= h * 60
    parts = []
    if h:
        parts.append(f"{h}h ")
    if m:
        parts.append(f"{m}m ")
    parts.append(f"{int(s)}s")
    return "".join(parts)


class Console:
    """Text output plus token and single-key input for the game."""

    def __init__(self, stdout=None, stdin=None, key_reader=None, clearer=None):
        self._output = sys.stdout if stdout is None else stdout
        self._input = sys.stdin if stdin is None else stdin
        if key_reader is None and stdin is None:
            key_reader = get_keypress
        if clearer is None and stdout is None:
            clearer = clear_screen
        self._key_reader = key_reader
        self._clearer = clearer

    def write(self, text):
        """Write text and flush it at once."""
        self._output.write(text)
        self._output.flush()

    def read_key(self):
        """Return one raw key press; raise EOFError when input is exhausted."""
        if self._key_reader is not None:
            return self._key_reader()
        return _read_char(self._input)

    def read_token(self):
        """Return the next whitespace-delimited word; raise EOFError at end."""
        ch = _read_char(self._input)
        while ch.isspace():
            ch = _read_char(self._input)
        chars = [ch]
        while True:
            ch = self._input.read(1)
            if not ch or ch.isspace():
                break
            chars.append(ch)
        return "".join(chars)

    def pause_for_keypress(self):
        """Wait until any key is pressed."""
        self.read_key()

    def clear(self):
        """Flush pending output and clear the screen."""
        self._output.flush()
        if self._clearer is not None:
            self._clearer()