"""Backtracking Sudoku solver."""

from __future__ import annotations

from .board import SIZE, SudokuBoard


def _first_empty(board: SudokuBoard) -> tuple[int, int] | None:
    return next(
        (
            (row, col)
            for row in range(1, SIZE + 1)
            for col in range(1, SIZE + 1)
            if board.get(row, col) == 0
        ),
        None,
    )


def solve(board: SudokuBoard) -> bool:
    """Fill the board's empty cells in place.

    Returns True when every cell is filled. On failure the board is left
    as it was given.
    """
    cell = _first_empty(board)
    if cell is None:
        return True
    row, col = cell
    for value in range(1, SIZE + 1):
        if board.can_place(row, col, value):
            board[row, col] = value
            if solve(board):
                return True
            board[row, col] = 0
    return False