import random

import pytest

from sudokuplay.board import SudokuBoard
from sudokuplay.generator import SudokuGenerator
from sudokuplay.solver import solve

SOLUTION = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]


class ScriptedRandom:
    """Returns scripted values first, then seeded random ones."""

    def __init__(self, script, seed=0):
        self._script = list(script)
        self._fallback = random.Random(seed)

    def randrange(self, stop):
        if self._script:
            return self._script.pop(0)
        return self._fallback.randrange(stop)


# First row 1..9, then 4 below the 1: (number - 1, row index, col index).
FILL_SCRIPT = [v for col in range(9) for v in (col, 0, col)] + [3, 1, 0]


def solved_board():
    return SudokuBoard([[int(ch) for ch in line] for line in SOLUTION])


def no_conflicts(board):
    rows = [list(line) for line in board]
    groups = rows + [list(col) for col in zip(*rows)]
    groups += [
        [rows[r][c] for r in range(top, top + 3) for c in range(left, left + 3)]
        for top in (0, 3, 6)
        for left in (0, 3, 6)
    ]
    for group in groups:
        filled = [v for v in group if v]
        if len(filled) != len(set(filled)):
            return False
    return True


def zeros(board):
    return sum(1 for line in board for v in line if v == 0)


def test_random_fill_follows_script():
    board = SudokuBoard()
    SudokuGenerator(ScriptedRandom(FILL_SCRIPT)).random_fill(board)
    assert list(board)[0] == tuple(range(1, 10))
    assert board.get(2, 1) == 4
    assert zeros(board) == 81 - 10


def test_random_fill_respects_rules():
    board = SudokuBoard()
    SudokuGenerator(random.Random(7)).random_fill(board)
    assert no_conflicts(board)
    assert 1 <= 81 - zeros(board) <= 10


def test_has_unique_solution_true_for_solvable_puzzle():
    board = solved_board()
    for row, col in [(1, 1), (5, 5), (9, 9)]:
        board[row, col] = 0
    before = board.copy()
    assert SudokuGenerator(random.Random(1)).has_unique_solution(board)
    assert board == before


def test_has_unique_solution_false_for_dead_end():
    board = solved_board()
    board[1, 1] = 0
    board[1, 2] = 5
    assert not SudokuGenerator(random.Random(1)).has_unique_solution(board)


def test_remove_after_solve_clears_exact_count():
    board = solved_board()
    SudokuGenerator(random.Random(3)).remove_after_solve(board, 25)
    assert zeros(board) == 25
    full = solved_board()
    for line, full_line in zip(board, full):
        for value, expected in zip(line, full_line):
            assert value in (0, expected)


def test_remove_after_solve_rejects_too_many():
    board = SudokuBoard()
    with pytest.raises(ValueError):
        SudokuGenerator(random.Random(3)).remove_after_solve(board, 1)


def test_remove_after_solve_rejects_negative():
    with pytest.raises(ValueError):
        SudokuGenerator(random.Random(3)).remove_after_solve(solved_board(), -1)


@pytest.mark.parametrize("removals", [20, 30, 40])
def test_generate_produces_solvable_puzzle(removals):
    board = SudokuBoard()
    SudokuGenerator(ScriptedRandom(FILL_SCRIPT, seed=removals)).generate(board, removals)
    assert zeros(board) == removals
    assert no_conflicts(board)
    assert list(board)[0].count(0) <= 9
    solved = board.copy()
    assert solve(solved)
    assert solved.is_complete()
    assert no_conflicts(solved)
    for line, full_line in zip(board, solved):
        for value, full in zip(line, full_line):
            assert value in (0, full)