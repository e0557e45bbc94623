"""A terminal Sudoku game with a puzzle generator and a backtracking solver."""

__version__ = "0.1.0"
__all__ = ["board", "solver", "generator", "game"]