"""Interactive text Sudoku game."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from enum import Enum
from pathlib import Path
from typing import TextIO

from .board import CellOccupiedError, SudokuBoard
from .generator import SudokuGenerator
from .solver import solve

MENU = (
    "\n1) Enter a move\n"
    "2) Solve automatically\n"
    "3) Load puzzle from file\n"
    "4) Save current puzzle to file\n"
    "5) Exit\n"
    "Choice: "
)


class Difficulty(Enum):
    """Difficulty levels, valued by the number of cells cleared."""

    EASY = 20
    MEDIUM = 30
    HARD = 40

    @property
    def removals(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()


class SudokuGame:
    """A menu-driven Sudoku session over text streams."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        generator: SudokuGenerator | None = None,
        puzzle_path: str | Path = "puzzle.txt",
        progress_path: str | Path = "UserProgress.txt",
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self.generator = generator if generator is not None else SudokuGenerator()
        self.puzzle_path = Path(puzzle_path)
        self.progress_path = Path(progress_path)
        self.board: SudokuBoard | None = None
        self._pending: deque[str] = deque()

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _next_token(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError("input ended")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_choice(self, low: int, high: int) -> int:
        """Read integers until one lies within [low, high]; EOFError at end of input."""
        while True:
            token = self._next_token()
            try:
                value = int(token)
            except ValueError:
                self._pending.clear()
                self._write("Invalid input. Please enter an integer. Try again: ")
                continue
            if not low <= value <= high:
                self._write("Choice out of range. Try again: ")
                continue
            return value

    def new_puzzle(self) -> Difficulty:
        """Ask for a difficulty and replace the board with a fresh puzzle."""
        levels = list(Difficulty)
        self._say("Select difficulty level:")
        for number, level in enumerate(levels, start=1):
            self._say(f"{number}) {level.label} ({level.removals} cells removed)")
        self._write("Choice: ")
        difficulty = levels[self.read_choice(1, len(levels)) - 1]
        board = SudokuBoard()
        self.generator.generate(board, difficulty.removals)
        self.board = board
        return difficulty

    def start(self) -> None:
        """Run the menu loop until the player exits."""
        if self.board is None:
            self.new_puzzle()
        while True:
            if self.board.is_complete():
                self._write(
                    "\n Congratulations!!!! You've completed the Sudoku successfully! \n"
                )
                self._write("Do you want to play again?\n1) Yes\n2) No (Exit)\nChoice: ")
                if self.read_choice(1, 2) == 1:
                    self.new_puzzle()
                    continue
                self._say("Thanks for playing! Goodbye!")
                return

            self._write(self.board.render() + "\n\n")
            self._write(MENU)
            choice = self.read_choice(1, 5)
            if choice == 1:
                self.enter_move()
            elif choice == 2:
                self.solve_automatically()
            elif choice == 3:
                self.load_puzzle()
            elif choice == 4:
                self.save_puzzle()
            else:
                self._say("Exiting the game.")
                return

    def enter_move(self) -> None:
        """Ask for a move, accept it only if it matches the solution, then save progress."""
        solution = self.board.copy()
        if not solve(solution):
            self._say(
                "Current board cannot be solved. Please reset or load a valid puzzle."
            )
            return

        self._write("Enter row (1-9): ")
        row = self.read_choice(1, 9)
        self._write("Enter column (1-9): ")
        col = self.read_choice(1, 9)
        self._write("Enter value (1-9): ")
        value = self.read_choice(1, 9)

        if solution.get(row, col) != value:
            self._say("Wrong Move.")
            return

        try:
            accepted = self.board.set_element(row, col, value)
        except CellOccupiedError as error:
            self._say(str(error))
        else:
            self._say("Move is accepted" if accepted else "Wrong number")

        try:
            self.board.save_to_file(self.progress_path)
        except OSError:
            self._say("File is not Open to write the board into it in user mode")

    def solve_automatically(self) -> None:
        """Solve the current board and show it, or report that it has no solution."""
        if solve(self.board):
            self._write(self.board.render() + "\n\n")
        else:
            self._say("This Board has no solution.")

    def load_puzzle(self) -> None:
        """Replace the board with the puzzle file's contents."""
        try:
            self.board.load_from_file(self.puzzle_path)
        except OSError:
            self._say(
                "You tried to load a sudoku board from a file that doesn't exist"
            )
        except ValueError as error:
            self._say(str(error))
        else:
            self._say("The board is loaded successfully.")

    def save_puzzle(self) -> None:
        """Write the board to the progress file."""
        try:
            self.board.save_to_file(self.progress_path)
        except OSError:
            self._say("File is not Open to write the board into it in user mode")
        else:
            self._say("File is saved successfully.")


def main(argv: list[str] | None = None) -> int:
    """Play Sudoku on the terminal."""
    parser = argparse.ArgumentParser(prog="sudokuplay", description="Play Sudoku.")
    parser.add_argument("--puzzle", default="puzzle.txt", help="file to load puzzles from")
    parser.add_argument(
        "--progress", default="UserProgress.txt", help="file to save progress to"
    )
    parser.add_argument("--seed", type=int, help="seed for puzzle generation")
    args = parser.parse_args(argv)

    generator = SudokuGenerator(random.Random(args.seed))
    game = SudokuGame(
        generator=generator, puzzle_path=args.puzzle, progress_path=args.progress
    )
    try:
        game.start()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())