"""The 9x9 Sudoku grid: placement rules, text rendering and file storage."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

SIZE = 9
BOX = 3
SEPARATOR = "*" * 25
_EMPTY = 0


class CellOccupiedError(ValueError):
    """Raised when a value is placed in a cell that already holds one."""


def _check_position(row: int, col: int) -> None:
    if not 1 <= row <= SIZE:
        raise ValueError("Row must be between 1 and 9")
    if not 1 <= col <= SIZE:
        raise ValueError("Column must be between 1 and 9")


def _check_value(value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= SIZE:
        raise ValueError(f"Cell value must be between 0 and 9, got {value!r}")


class SudokuBoard:
    """A Sudoku grid addressed by 1-based row and column; 0 marks an empty cell."""

    def __init__(self, cells: Iterable[Iterable[int]] | None = None) -> None:
        if cells is None:
            self._cells = [[_EMPTY] * SIZE for _ in range(SIZE)]
            return
        grid = [list(row) for row in cells]
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError("A board must have 9 rows of 9 cells")
        for row in grid:
            for value in row:
                _check_value(value)
        self._cells = grid

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return self.get(row, col)

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        """Write a cell directly, without checking the placement rules."""
        row, col = position
        _check_position(row, col)
        _check_value(value)
        self._cells[row - 1][col - 1] = value

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return (tuple(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows = "".join("".join(map(str, row)) for row in self._cells)
        return f"SudokuBoard({rows!r})"

    def __str__(self) -> str:
        return self.render()

    def get(self, row: int, col: int) -> int:
        """Return the value at a 1-based position (0 when empty)."""
        _check_position(row, col)
        return self._cells[row - 1][col - 1]

    def can_place(self, row: int, col: int, value: int) -> bool:
        """Tell whether value is absent from the cell's row, column and box."""
        _check_position(row, col)
        r, c = row - 1, col - 1
        if value in self._cells[r]:
            return False
        if any(line[c] == value for line in self._cells):
            return False
        top, left = r // BOX * BOX, c // BOX * BOX
        return all(
            value not in line[left:left + BOX]
            for line in self._cells[top:top + BOX]
        )

    def set_element(self, row: int, col: int, value: int) -> bool:
        """Place value in an empty cell if the rules allow it.

        Returns True when the move is accepted and False when the value
        clashes with its row, column or box.
        """
        _check_position(row, col)
        if not isinstance(value, int) or not 1 <= value <= SIZE:
            raise ValueError("Value must be between 1 and 9")
        if self._cells[row - 1][col - 1] != _EMPTY:
            raise CellOccupiedError("This place is not empty")
        if not self.can_place(row, col, value):
            return False
        self._cells[row - 1][col - 1] = value
        return True

    def load_from_file(self, path: str | Path) -> None:
        """Fill the board from a text file of digits, with '.' for empty cells.

        Every other character is ignored; the first 81 cells read are used.
        """
        text = Path(path).read_text()
        values = [
            0 if ch == "." else int(ch)
            for ch in text
            if ch == "." or ch in "0123456789"
        ]
        if len(values) < SIZE * SIZE:
            raise ValueError(
                f"Puzzle file holds {len(values)} cells, 81 are needed"
            )
        self._cells = [
            values[start:start + SIZE] for start in range(0, SIZE * SIZE, SIZE)
        ]

    def save_to_file(self, path: str | Path) -> None:
        """Write the rendered board to a text file."""
        Path(path).write_text(self.render())

    def render(self) -> str:
        """Return the board as text, with box borders."""
        lines = [SEPARATOR]
        for index, row in enumerate(self._cells, start=1):
            groups = (
                " ".join(str(v) if v else "." for v in row[start:start + BOX])
                for start in range(0, SIZE, BOX)
            )
            lines.append(" | ".join(groups))
            if index % BOX == 0 and index != SIZE:
                lines.append(SEPARATOR)
        return "\n".join(lines) + "\n"

    def is_complete(self) -> bool:
        """Tell whether every cell holds a value."""
        return all(_EMPTY not in row for row in self._cells)

    def copy(self) -> SudokuBoard:
        """Return an independent copy of the board."""
        return SudokuBoard(self._cells)