"""Reading, writing and generating matrices in a plain-text format.

Each matrix is written as a header line ``Matrix (<id>) of <rows>x<columns>``
followed by one indented line per row.
"""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence
from itertools import islice
from os import PathLike
from pathlib import Path
from typing import Union

from .matrix import Matrix, Number

DEFAULT_PATH = "matrices.txt"
DEFAULT_SEED = 1

_MARKER = "Matrix"
_INDENT = " " * 11
_LARGEST = sys.float_info.max

PathType = Union[str, "PathLike[str]"]


def _format_value(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_matrix(matrix: Matrix) -> str:
    """Return the text form of one matrix, ending with a newline."""
    lines = [f"{_MARKER} (0x{id(matrix):x}) of {matrix.rows}x{matrix.columns}"]
    lines.extend(
        _INDENT + "".join(f"{_format_value(value):>4} " for value in row) for row in matrix
    )
    return "\n".join(lines) + "\n"


def _parse_size(text: str) -> tuple[int, int]:
    rows_text, separator, columns_text = text.partition("x")
    if not separator:
        raise ValueError(f"Malformed matrix size {text!r}.")
    rows, columns = int(rows_text), int(columns_text)
    if rows < 0 or columns < 0:
        raise ValueError(f"Negative matrix size {text!r}.")
    return rows, columns


def parse_matrices(text: str) -> list[Matrix]:
    """Parse every matrix in ``text``.

    A block whose size has a zero dimension yields an empty matrix.
    """
    tokens = iter(text.split())
    matrices: list[Matrix] = []
    for marker in tokens:
        if marker != _MARKER:
            raise ValueError(f"Expected {_MARKER!r}, found {marker!r}.")
        header = list(islice(tokens, 3))
        if len(header) < 3:
            raise ValueError("Truncated matrix header.")
        rows, columns = _parse_size(header[2])
        if not (rows and columns):
            matrices.append(Matrix())
            continue
        values = [float(token) for token in islice(tokens, rows * columns)]
        if len(values) < rows * columns:
            raise ValueError("Truncated matrix values.")
        matrices.append(
            Matrix.from_rows(values[start : start + columns] for start in range(0, len(values), columns))
        )
    return matrices


def write_matrices(matrices: Iterable[Matrix], path: PathType = DEFAULT_PATH) -> None:
    """Write the matrices to ``path``, replacing its contents."""
    Path(path).write_text("".join(format_matrix(matrix) for matrix in matrices))


def read_matrices(path: PathType = DEFAULT_PATH) -> list[Matrix]:
    """Read every matrix stored in ``path``."""
    return parse_matrices(Path(path).read_text())


def generate_random_matrix(rows: int, columns: int, seed: object = DEFAULT_SEED) -> Matrix:
    """Return a matrix of values drawn uniformly from [0, largest float).

    The same seed always gives the same matrix.
    """
    if rows < 0 or columns < 0 or (rows == 0) != (columns == 0):
        raise ValueError("Columns and rows must exist.")
    rng = random.Random(seed)
    return Matrix.from_rows(
        [rng.uniform(0.0, _LARGEST) for _ in range(columns)] for _ in range(rows)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Generate one random square matrix per size and write them to the data file."""
    parser = argparse.ArgumentParser(
        prog="munkreskit-generate",
        description=f"Write random square matrices to {DEFAULT_PATH}.",
    )
    parser.add_argument("sizes", nargs="*", type=int, metavar="SIZE")
    args = parser.parse_args(argv)
    write_matrices(generate_random_matrix(size, size) for size in args.sizes)
    return 0