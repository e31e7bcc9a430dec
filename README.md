# tile2048

The 2048 sliding-tile puzzle, played in a terminal.

Slide the tiles on the board. Two tiles with the same number merge into one
holding their sum, and the sum is added to your score. Reach the 2048 tile to
win, then choose to keep playing in endless mode or stop. Boards from 3x3 up
to 10x10 are supported. Scores and statistics are recorded only for new games
on the standard 4x4 board.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

## Playing

```
tile2048
```

Options:

- `--data-dir DIR` keeps `scores.txt`, `statistics.txt` and the
  `SavedGameFiles` directory under `DIR` instead of the default locations
  (see *Files* below).

The main menu offers:

1. Play a New Game
2. Continue Previous Game
3. View Highscores and Statistics
4. Exit

When starting a new game you are asked for the board size; enter `0` to go
back to the menu. A size outside 3 to 10 is refused and asked for again.

Continuing a previous game lists the files in the saved-games directory and
asks for the number of the one to load. If the chosen file cannot be read,
you are told so and a new game is set up instead.

Pressing Ctrl-C, or reaching the end of input, leaves the game.

### Controls

Letter keys are not case-sensitive.

| Key                       | Action                                   |
|---------------------------|------------------------------------------|
| `W` / `K` / Up arrow      | Move up                                  |
| `A` / `H` / Left arrow    | Move left                                |
| `S` / `J` / Down arrow    | Move down                                |
| `D` / `L` / Right arrow   | Move right                               |
| `Z` or `P`                | Save the game; you are asked for a file name |
| `X`                       | Quit endless mode (only in endless mode) |
| `M`                       | Return to the main menu                  |

After reaching 2048 you are asked whether to continue; an answer starting
with `N` ends the game, anything else carries on in endless mode.

When no move is left, you are offered one chance to clear two random tiles
and carry on (answer `Y`); answering `N` ends the game.

After a new 4x4 game ends, its statistics are shown and you are asked for a
name to store with the score.

### Files

Without `--data-dir`, saved games are written under `../data/SavedGameFiles/`,
and the high-score table and overall statistics under `../data/scores.txt`
and `../data/statistics.txt`, relative to the directory the game is started
from. Saving under a name that already exists replaces the old file.

## Using the board in code

The game logic can be driven without the terminal:

```python
from tile2048.gameboard import GameBoard
from tile2048.game_input import Move

board = GameBoard.of_size(4)
board.add_tile()          # place a 2 (or sometimes a 4) on a free tile
board.tumble(Move.LEFT)   # slide and merge towards the left
print(board.score, board.can_move())
print(board.state_string())
```

`tile2048.saver.save_game_play_state` and `tile2048.loader.load_game` write
and read a board in the saved-game format.

## Limitations

- It runs only in a text terminal; there is no graphical interface.
- Games continued from a save do not add to the high scores or statistics.

## Running the tests

```
pip install .[test]
pytest
```