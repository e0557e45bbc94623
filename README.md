# sudokuplay

A Sudoku game for the terminal. It generates a puzzle at the difficulty you pick and checks each move you make against the board's solution. It can also solve the board for you, load a puzzle from a file and save your progress.

## Installing

```
pip install .
```

## Playing

```
sudokuplay
```

Options:

- `--puzzle FILE`: the file that menu option 3 loads from (default `puzzle.txt`).
- `--progress FILE`: the file that progress is saved to (default `UserProgress.txt`).
- `--seed N`: a seed for puzzle generation, so that the same puzzles come up again.

The same command can be run as `python -m sudokuplay.game`.

First pick a difficulty:

1. Easy: 20 cells removed
2. Medium: 30 cells removed
3. Hard: 40 cells removed

After that the board is printed, followed by a menu:

1. Enter a move. You give a row, a column and a value, each from 1 to 9. A move is accepted only if it matches the board's solution and the cell is empty. After each move that matches the solution, the board is written to the progress file. If the current board has no solution, no move is asked for.
2. Solve automatically. The board is filled in by backtracking, or the game says it has no solution.
3. Load puzzle from file. The board is read from the puzzle file.
4. Save current puzzle to file. The board is written to the progress file.
5. Exit.

Input that is not an integer, or is out of range, is asked for again. When every cell is filled, the game offers you a new puzzle. If the input ends, the command stops with exit status 1.

## Puzzle files

When a puzzle is loaded, each digit counts as a cell and each `.` counts as an empty cell. Every other character is ignored. The first 81 cells are read in row order; a file with fewer is refused. So the game's own saved layout can be loaded back in, as can a plain file of nine lines:

```
53..7....
6..195...
.98....6.
8...6...3
4..8.3..1
7...2...6
.6....28.
...419..5
....8..79
```

## Using it as a library

```python
from sudokuplay.board import SudokuBoard
from sudokuplay.solver import solve

board = SudokuBoard()
board.load_from_file("puzzle.txt")
if solve(board):
    print(board.render())
```

- `sudokuplay.board.SudokuBoard` holds the grid, addressed by 1-based row and column with 0 for an empty cell. `set_element` places a value in an empty cell and returns `False` when it clashes with its row, column or box; it raises `CellOccupiedError` when the cell is already filled and `ValueError` for positions or values out of range. `can_place`, `is_complete`, `render`, `copy`, `load_from_file` and `save_to_file` do what their names say.
- `sudokuplay.solver.solve(board)` fills the board in place and returns `True`, or returns `False` and leaves the board as it was.
- `sudokuplay.generator.SudokuGenerator` builds puzzles from an optional `random.Random` you supply: `generate(board, removals)` places ten random values, solves the board and then clears `removals` cells, putting a cell back whenever `has_unique_solution` says no.
- `sudokuplay.game.SudokuGame` runs the interactive game over any input and output text streams, and `sudokuplay.game.Difficulty` lists the three levels.

## What it does not do

There is no undo, no hint and no pencil marking. A loaded puzzle is not checked against the Sudoku rules; a board that breaks them simply has no solution, and moves are then refused.

## Running the tests

```
pip install ".[test]"
pytest
```