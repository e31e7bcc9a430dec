import re

from tile2048.scores_graphics import end_game_statistics_prompt, scoreboard_overlay

ANSI = re.compile(r"\x1b\[\d+m")


def plain(text):
    return ANSI.sub("", text)


ROWS = [
    ("1", "alice", "300", "Yes", "50", "2048", "1m 0s"),
    ("2", "bob", "120", "No", "20", "64", "7s"),
]


def test_empty_scoreboard_message():
    text = plain(scoreboard_overlay([]))
    assert "No saved scores." in text
    assert "┌" not in text
    assert text.endswith("\n\n")


def test_scoreboard_title():
    lines = plain(scoreboard_overlay(ROWS)).split("\n")
    assert lines[0] == "  SCOREBOARD"
    assert lines[1] == "  ──────────"


def test_table_lines_are_aligned_with_border():
    lines = plain(scoreboard_overlay(ROWS)).split("\n")
    table = lines[2:2 + 4 + len(ROWS)]
    width = len(table[0])
    assert table[0].startswith("  ┌")
    assert table[-1].startswith("  └")
    assert all(len(line) == width for line in table)


def test_rows_appear_in_given_order():
    lines = plain(scoreboard_overlay(ROWS)).split("\n")
    rows = lines[5:5 + len(ROWS)]
    for line, row in zip(rows, ROWS):
        cells = [cell.strip() for cell in line.strip().strip("│").split("│")]
        assert cells[0] == row[0] + "."
        assert cells[1:] == list(row[1:])


def test_header_has_column_names():
    header = plain(scoreboard_overlay(ROWS)).split("\n")[3]
    cells = [cell.strip() for cell in header.strip().strip("│").split("│")]
    assert cells == ["No.", "Name", "Score", "Won?", "Moves", "Largest Tile", "Duration"]


def test_end_game_statistics_prompt_layout():
    text = end_game_statistics_prompt("100", "64", "10", "5s")
    lines = plain(text).split("\n")
    assert lines[0] == "  STATISTICS"
    assert lines[1] == "  ──────────"
    expected = [
        ("Final score:", "100"),
        ("Largest Tile:", "64"),
        ("Number of moves:", "10"),
        ("Time taken:", "5s"),
    ]
    for line, (label, value) in zip(lines[2:6], expected):
        assert line[:2] == "  "
        assert line[2:21].rstrip() == label
        assert line[21:] == value
    assert text.endswith("\n\n")