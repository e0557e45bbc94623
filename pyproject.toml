[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokuplay"
version = "0.1.0"
description = "Play Sudoku in the terminal: generated puzzles, checked moves and an automatic solver."
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "game", "solver", "backtracking", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudokuplay = "sudokuplay.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokuplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
