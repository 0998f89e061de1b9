"""Solve a random assignment problem and check that the result is a valid assignment."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from typing import TextIO

from .matrix import Matrix, Number
from .munkres import Munkres

DEFAULT_ROWS = 101
DEFAULT_COLUMNS = 101
_RANDOM_LIMIT = 2**31


def random_matrix(rows: int, columns: int, rng: random.Random | None = None) -> Matrix:
    """Return a matrix of random non-negative whole numbers stored as floats."""
    rng = rng if rng is not None else random.Random()
    return Matrix.from_rows(
        [float(rng.randrange(_RANDOM_LIMIT)) for _ in range(columns)] for _ in range(rows)
    )


def check_assignment(matrix: Matrix) -> list[str]:
    """Return a message for every row and column that does not hold exactly one zero."""
    problems = []
    for index, row in enumerate(matrix):
        count = sum(1 for value in row if value == 0)
        if count != 1:
            problems.append(f"Row {index} has {count} columns that have been matched.")
    for index, column in enumerate(zip(*matrix)):
        count = sum(1 for value in column if value == 0)
        if count != 1:
            problems.append(f"Column {index} has {count} rows that have been matched.")
    return problems


def _format_value(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _print_matrix(matrix: Matrix, out: TextIO) -> None:
    for row in matrix:
        print("".join(f"{_format_value(value):>2}," for value in row), file=out)
    print(file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a random matrix, solve it, print the result and report any faults.

    Takes either no arguments or a row count and a column count.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    rows, columns = DEFAULT_ROWS, DEFAULT_COLUMNS
    if len(args) == 2:
        rows, columns = int(args[0]), int(args[1])

    matrix = random_matrix(rows, columns)
    _print_matrix(matrix, sys.stdout)
    Munkres().solve(matrix)
    _print_matrix(matrix, sys.stdout)

    for problem in check_assignment(matrix):
        print(problem, file=sys.stderr)
    return 0