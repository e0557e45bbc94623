"""Puzzle generation: seed a few cells, solve, then clear cells."""

from __future__ import annotations

import random

from .board import SIZE, SudokuBoard
from .solver import solve

FILL_COUNT = 10


class SudokuGenerator:
    """Builds playable puzzles by filling and then clearing a board."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def _random_cell(self) -> tuple[int, int]:
        row = self._rng.randrange(SIZE) + 1
        col = self._rng.randrange(SIZE) + 1
        return row, col

    def generate(self, board: SudokuBoard, removals: int) -> None:
        """Turn board into a puzzle with `removals` cells cleared."""
        self.random_fill(board)
        if solve(board):
            self.remove_after_solve(board, removals)
        else:
            self.random_fill(board)
            self.remove_after_solve(board, removals)

    def random_fill(self, board: SudokuBoard) -> None:
        """Write ten random values to random cells where the rules allow them."""
        placed = 0
        while placed < FILL_COUNT:
            value = self._rng.randrange(SIZE) + 1
            row, col = self._random_cell()
            if board.can_place(row, col, value):
                board[row, col] = value
                placed += 1

    def remove_after_solve(self, board: SudokuBoard, removals: int) -> None:
        """Clear `removals` random filled cells, keeping the puzzle solvable."""
        filled = sum(1 for line in board for value in line if value)
        if removals < 0 or removals > filled:
            raise ValueError(
                f"Cannot clear {removals} cells from a board with {filled} filled"
            )
        cleared = 0
        while cleared < removals:
            row, col = self._random_cell()
            value = board.get(row, col)
            if not value:
                continue
            board[row, col] = 0
            if self.has_unique_solution(board):
                cleared += 1
            else:
                board[row, col] = value

    def has_unique_solution(self, board: SudokuBoard) -> bool:
        """Count solutions the way the generator does and tell whether it found one."""
        work = board.copy()
        solutions = 1 if solve(work) else 0
        for row in range(1, SIZE + 1):
            for col in range(1, SIZE + 1):
                if work.get(row, col):
                    continue
                for value in range(1, SIZE + 1):
                    if work.can_place(row, col, value):
                        work[row, col] = value
                        if solve(work):
                            solutions += 1
                        work[row, col] = 0
        return solutions == 1