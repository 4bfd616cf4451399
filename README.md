# minegrid

minegrid is a small minesweeper game for the terminal. You choose a square grid of
3×3, 6×6 or 9×9 cells. The board has as many mines as it has rows, and they
are placed at random. Each turn you either flag a cell or guess it.

## Installing

```
pip install .
```

## Playing

```
minegrid
```

The command takes no options other than `--help`. The main menu offers:

```
--- MAIN MENU ---
1. START NEW GAME
0. QUIT
```

After you choose a grid size, the game prints the board. Rows are labelled `A`, `B`,
`C`, and so on. Columns are numbered from `1`. Each turn has two steps:

1. Enter `1` to flag a cell or `2` to guess it.
2. Enter a coordinate such as `B2`. The game takes the last letter as the row
   and joins all the digits to form the column number. If the coordinate does
   not name a cell on the board, the game prints `INVALID COORDINATE!` and
   asks for the move again.

Cell markers:

- `O`: a cell you have not touched
- `M`: an untouched cell that holds a mine. The board always shows where the mines are.
- `F`: a flagged cell
- a digit: a guessed cell, with the number of mines around it
- `X`: a guessed cell that held a mine

Every move is checked against the cell it names. A move on a cell that holds a
mine ends the game as a loss, and flagging that cell counts the same as
guessing it. You win when your number of guesses equals the number of cells
without a mine. A second guess of the same cell counts again. A win takes
precedence over a loss on the same move. End-of-file or Ctrl-C quits the game.

## Using the board in code

```python
from minegrid.board import GameBoard, GameStatus

board = GameBoard(9, mines=[0, 4, 8])   # a 3×3 grid with fixed mines
cell = board.find_cell("A2")            # -> 1
board.count_adjacent_mines(cell)        # -> 2, also stored on the cell
board.reveal_cell(cell)
print(board.render())
print(board.check_status(cell) is GameStatus.ACTIVE)
```

- `GameBoard(num_cells, mines=None, rng=None)` builds a square board. The side
  must be between 2 and 26. Any other size raises `ValueError`. If you do not
  pass `mines`, the board takes one mine per row at random from `rng`, or from
  a new `random.Random`.
- `place_mines(positions)` puts mines on exactly the given cell indices. An
  index outside the board raises `IndexError`.
- `find_cell(coord)` turns a coordinate into a cell index and raises
  `ValueError` for coordinates that are not on the board.
- `placement_of(row_index, col_index)` returns a `Placement` that says where a
  position sits relative to the board's edges, such as `TOP_LEFT`, `BOTTOM`
  or `CENTER`.
- `flag_cell`, `reveal_cell` and `check_status` work as described under Playing.
- `minegrid.cell.Cell.show()` returns a cell's marker.
- `minegrid.cli` has the menus. Each one takes a `read` function and a `write`
  function, so you can drive them without a terminal.

## What it does not do

Guessing a cell with no mines around it does not uncover the cells next to it.
The game keeps no scores or statistics between games, and it cannot save or
load a game.