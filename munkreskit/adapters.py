"""Adapters that solve assignment problems held in other kinds of containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from typing import Any, Generic, TypeVar

import numpy as np

from .matrix import Matrix
from .munkres import Munkres

ContainerT = TypeVar("ContainerT")


class Adapter(ABC, Generic[ContainerT]):
    """Converts a container to a :class:`Matrix`, solves it and writes the result back."""

    def __init__(self) -> None:
        self._munkres = Munkres()

    @abstractmethod
    def convert_to_matrix(self, container: ContainerT) -> Matrix:
        """Return a new matrix holding the container's values."""

    @abstractmethod
    def convert_from_matrix(self, container: ContainerT, matrix: Matrix) -> None:
        """Write the matrix's values into the container."""

    def solve(self, container: ContainerT) -> None:
        """Solve the assignment problem held in ``container`` in place.

        Afterwards the chosen cells hold 0 and every other cell holds -1.
        """
        matrix = self.convert_to_matrix(container)
        self._munkres.solve(matrix)
        self.convert_from_matrix(container, matrix)


class NestedListAdapter(Adapter[MutableSequence[Any]]):
    """Adapter for a list of row lists of any shape."""

    def convert_to_matrix(self, container: Sequence[Sequence[Any]]) -> Matrix:
        return Matrix.from_rows(container)

    def convert_from_matrix(self, container: MutableSequence[Any], matrix: Matrix) -> None:
        """Replace the container's contents with the matrix's rows."""
        container[:] = matrix.to_lists()


class FixedShapeAdapter(Adapter[Sequence[MutableSequence[Any]]]):
    """Adapter for row sequences whose shape is fixed up front."""

    def __init__(self, rows: int, columns: int) -> None:
        super().__init__()
        if rows <= 0 or columns <= 0:
            raise ValueError("Columns and rows must exist.")
        self.rows = rows
        self.columns = columns

    def _check_container(self, container: Sequence[Sequence[Any]]) -> None:
        if len(container) != self.rows or any(len(row) != self.columns for row in container):
            raise ValueError(f"Container must have shape {self.rows}x{self.columns}.")

    def convert_to_matrix(self, container: Sequence[Sequence[Any]]) -> Matrix:
        self._check_container(container)
        return Matrix.from_rows(container)

    def convert_from_matrix(
        self, container: Sequence[MutableSequence[Any]], matrix: Matrix
    ) -> None:
        """Overwrite each row of the container with the matching matrix row."""
        self._check_container(container)
        if (matrix.rows, matrix.columns) != (self.rows, self.columns):
            raise ValueError(f"Matrix must have shape {self.rows}x{self.columns}.")
        for values, target in zip(matrix, container):
            target[:] = values


class NumpyAdapter(Adapter[np.ndarray]):
    """Adapter for two-dimensional numpy arrays."""

    def convert_to_matrix(self, container: np.ndarray) -> Matrix:
        array = np.asarray(container)
        if array.ndim != 2:
            raise ValueError("Only two-dimensional arrays can be converted.")
        return Matrix.from_rows(array.tolist())

    def convert_from_matrix(self, container: np.ndarray, matrix: Matrix) -> None:
        """Write the matrix into the top-left corner of the array."""
        if not isinstance(container, np.ndarray) or container.ndim != 2:
            raise ValueError("Only two-dimensional arrays can be filled.")
        if container.shape[0] < matrix.rows or container.shape[1] < matrix.columns:
            raise ValueError("The array is smaller than the matrix.")
        if matrix.rows and matrix.columns:
            container[: matrix.rows, : matrix.columns] = matrix.to_lists()