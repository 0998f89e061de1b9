"""Solving the linear assignment problem with the Munkres algorithm."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable
from itertools import product

import numpy as np

from .matrix import Matrix

_NORMAL = 0
_STAR = 1
_PRIME = 2

_LARGEST = sys.float_info.max

_Cell = tuple[int, int]


class _Solver:
    """Runs the steps of the algorithm on a square cost array."""

    def __init__(self, cost: np.ndarray) -> None:
        self.cost = cost
        self.size = cost.shape[0]
        self.marks = np.zeros((self.size, self.size), dtype=np.int8)
        self.row_covered = np.zeros(self.size, dtype=bool)
        self.col_covered = np.zeros(self.size, dtype=bool)
        self.saved: _Cell = (0, 0)

    def run(self) -> np.ndarray:
        """Return a boolean array marking the chosen assignment."""
        steps: dict[int, Callable[[], int]] = {
            1: self._star_zeros,
            2: self._cover_starred_columns,
            3: self._prime_zeros,
            4: self._augment,
            5: self._make_zeros,
        }
        step = 1
        with np.errstate(over="ignore", invalid="ignore"):
            while step:
                step = steps[step]()
        return self.marks == _STAR

    def _star_zeros(self) -> int:
        starred_columns: set[int] = set()
        for row, values in enumerate(self.cost):
            for col in map(int, np.flatnonzero(values == 0)):
                if col not in starred_columns:
                    self.marks[row, col] = _STAR
                    starred_columns.add(col)
                    break
        return 2

    def _cover_starred_columns(self) -> int:
        stars = self.marks == _STAR
        self.col_covered |= stars.any(axis=0)
        return 0 if np.count_nonzero(stars) >= self.size else 3

    def _find_uncovered_zero(self) -> _Cell | None:
        candidates = (
            (self.cost == 0)
            & ~self.row_covered[:, None]
            & ~self.col_covered[None, :]
        )
        flat = np.flatnonzero(candidates)
        if flat.size == 0:
            return None
        row, col = divmod(int(flat[0]), self.size)
        return row, col

    def _prime_zeros(self) -> int:
        found = self._find_uncovered_zero()
        if found is None:
            return 5
        row, _ = found
        self.marks[found] = _PRIME
        self.saved = found
        starred = np.flatnonzero(self.marks[row] == _STAR)
        if starred.size:
            self.row_covered[row] = True
            self.col_covered[int(starred[0])] = False
            return 3
        return 4

    def _augment(self) -> int:
        sequence = [self.saved]
        seen = {self.saved}
        col = self.saved[1]
        while True:
            star = next(
                (
                    (int(r), col)
                    for r in np.flatnonzero(self.marks[:, col] == _STAR)
                    if (int(r), col) not in seen
                ),
                None,
            )
            if star is None:
                break
            sequence.append(star)
            seen.add(star)
            row = star[0]
            prime = next(
                (
                    (row, int(c))
                    for c in np.flatnonzero(self.marks[row] == _PRIME)
                    if (row, int(c)) not in seen
                ),
                None,
            )
            if prime is None:
                break
            sequence.append(prime)
            seen.add(prime)
            col = prime[1]

        for cell in sequence:
            if self.marks[cell] == _STAR:
                self.marks[cell] = _NORMAL
            elif self.marks[cell] == _PRIME:
                self.marks[cell] = _STAR

        self.marks[self.marks == _PRIME] = _NORMAL
        self.row_covered[:] = False
        self.col_covered[:] = False
        return 2

    def _make_zeros(self) -> int:
        uncovered = self.cost[np.ix_(~self.row_covered, ~self.col_covered)]
        candidates = uncovered[(uncovered != 0) & (uncovered < _LARGEST)]
        h = float(candidates.min()) if candidates.size else _LARGEST
        self.cost[self.row_covered, :] += h
        self.cost[:, ~self.col_covered] -= h
        return 3


class Munkres:
    """Solver for the linear assignment problem."""

    def solve(self, matrix: Matrix) -> None:
        """Solve the assignment problem for ``matrix`` in place.

        Afterwards the chosen cells hold 0 and every other cell holds -1.
        A non-square matrix is padded with its largest value while solving.
        """
        rows, columns = matrix.rows, matrix.columns
        size = max(rows, columns)

        work = matrix.copy()
        if rows != columns:
            work.resize(size, size, work.max())

        self.replace_infinites(work)
        self.minimize_along_direction(work, rows >= columns)
        self.minimize_along_direction(work, rows < columns)

        assigned = _Solver(np.array(work.to_lists(), dtype=float)).run()

        for row, column in product(range(rows), range(columns)):
            matrix[row, column] = 0 if assigned[row, column] else -1

    @staticmethod
    def replace_infinites(matrix: Matrix) -> None:
        """Replace positive infinities by one more than the largest finite value.

        When every value is infinite, they all become 0.
        """
        if matrix.rows == 0 or matrix.columns == 0:
            raise ValueError("The matrix is empty.")
        finite = [value for row in matrix for value in row if value != math.inf]
        replacement = max(finite) + 1 if finite else 0
        for cell in product(range(matrix.rows), range(matrix.columns)):
            if matrix[cell] == math.inf:
                matrix[cell] = replacement

    @staticmethod
    def minimize_along_direction(matrix: Matrix, over_columns: bool) -> None:
        """Subtract each column's (or row's) minimum from it when that minimum is positive."""
        outer = matrix.columns if over_columns else matrix.rows
        inner = matrix.rows if over_columns else matrix.columns
        for i in range(outer):
            cells = [(j, i) if over_columns else (i, j) for j in range(inner)]
            smallest = min(matrix[cell] for cell in cells)
            if smallest > 0:
                for cell in cells:
                    matrix[cell] -= smallest