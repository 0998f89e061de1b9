"""A dense, resizable two-dimensional matrix of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union

Number = Union[int, float]


def _format_value(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Matrix:
    """A row-major matrix whose operations modify it in place.

    Cells are addressed as ``matrix[row, column]``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self._data: list[list[Number]] = []
        self._rows = 0
        self._columns = 0
        if rows == 0 and columns == 0:
            return
        self.resize(rows, columns)

    @classmethod
    def from_rows(cls, data: Iterable[Iterable[Number]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        rows = [list(row) for row in data]
        matrix = cls()
        if not rows:
            return matrix
        width = len(rows[0])
        if width == 0:
            raise ValueError("Rows must not be empty.")
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same number of columns.")
        matrix._data = rows
        matrix._rows = len(rows)
        matrix._columns = width
        return matrix

    def copy(self) -> Matrix:
        """Return an independent copy of this matrix."""
        return Matrix.from_rows(self._data)

    def resize(self, rows: int, columns: int, default_value: Number = 0) -> None:
        """Change the shape, keeping the overlapping values.

        New cells take ``default_value``. An empty matrix is filled with
        zeros instead, whatever ``default_value`` is.
        """
        if rows <= 0 or columns <= 0:
            raise ValueError("Columns and rows must exist.")
        if not self._data:
            self._data = [[0] * columns for _ in range(rows)]
        else:
            kept_columns = min(columns, self._columns)
            resized = [
                row[:kept_columns] + [default_value] * (columns - kept_columns)
                for row in self._data[:rows]
            ]
            resized.extend([default_value] * columns for _ in range(rows - len(resized)))
            self._data = resized
        self._rows = rows
        self._columns = columns

    def clear(self) -> None:
        """Set every cell to zero."""
        self._data = [[0] * self._columns for _ in range(self._rows)]

    def _check_key(self, key: tuple[int, int]) -> tuple[int, int]:
        try:
            row, column = key
        except (TypeError, ValueError):
            raise TypeError("Matrix indices must be a (row, column) pair.") from None
        if not 0 <= row < self._rows:
            raise IndexError(f"Row {row} out of range for {self._rows} rows.")
        if not 0 <= column < self._columns:
            raise IndexError(f"Column {column} out of range for {self._columns} columns.")
        return row, column

    def __getitem__(self, key: tuple[int, int]) -> Number:
        row, column = self._check_key(key)
        return self._data[row][column]

    def __setitem__(self, key: tuple[int, int], value: Number) -> None:
        row, column = self._check_key(key)
        self._data[row][column] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and self._data == other._data
        )

    def __iter__(self) -> Iterator[list[Number]]:
        """Iterate over copies of the rows."""
        return (list(row) for row in self._data)

    def __str__(self) -> str:
        lines = ["Matrix:"]
        lines.extend(
            "".join(f"{_format_value(value):>8}," for value in row) for row in self._data
        )
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def _values(self) -> Iterator[Number]:
        if not self._data:
            raise ValueError("The matrix is empty.")
        return (value for row in self._data for value in row)

    def min(self) -> Number:
        """Return the smallest value in the matrix."""
        return min(self._values())

    def max(self) -> Number:
        """Return the largest value in the matrix."""
        return max(self._values())

    @property
    def minsize(self) -> int:
        """The smaller of the row and column counts."""
        return min(self._rows, self._columns)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def to_lists(self) -> list[list[Number]]:
        """Return the values as a new list of row lists."""
        return [list(row) for row in self._data]