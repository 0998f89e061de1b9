# munkreskit

Solve the linear assignment problem with the Munkres (Hungarian) algorithm.

Given a cost matrix where entry `(row, column)` is the cost of giving task
`column` to worker `row`, `munkreskit` finds an assignment of minimal total
cost. Rectangular matrices are accepted: while solving, the matrix is padded
to a square with its largest value, and only the original cells are written
back. Positive infinite costs are allowed and are treated as one more than
the largest finite cost in the matrix.

## Installation

```
pip install munkreskit
```

`numpy` is installed as a dependency; the solver works on numpy arrays
internally and `NumpyAdapter` accepts numpy arrays.

## The result format

`Munkres.solve` works in place. After it returns, every chosen cell of the
matrix holds `0` and every other cell holds `-1`. For a square matrix each
row and each column holds exactly one `0`; for a rectangular one, each row
or column of the shorter side is matched exactly once.

## Quick start

```python
from munkreskit.matrix import Matrix
from munkreskit.munkres import Munkres

costs = Matrix.from_rows([
    [1.0, 0.0, 1.0],
    [0.0, 1.0, 1.0],
    [1.0, 1.0, 0.0],
])

Munkres().solve(costs)

print(costs.to_lists())
# [[-1, 0, -1], [0, -1, -1], [-1, -1, 0]]
```

## The `Matrix` type

`munkreskit.matrix.Matrix` is a small dense two-dimensional matrix.

- `Matrix(rows, columns)` creates a matrix filled with zeros and `Matrix()`
  an empty one; `Matrix.from_rows(data)` builds one from an iterable of
  equally long rows (a `ValueError` is raised otherwise).
- Cells are read and written with `matrix[row, column]`; indices out of
  range raise `IndexError`.
- `resize(rows, columns, default_value=0)` changes the shape in place,
  keeping the overlapping top-left block and filling new cells with
  `default_value` (an empty matrix is filled with zeros).
- `clear()` sets every cell to zero.
- `min()` and `max()` return the smallest and largest value; they raise
  `ValueError` on an empty matrix.
- The properties `rows`, `columns` and `minsize` (the smaller of the two)
  describe the shape.
- `copy()` gives an independent copy, `to_lists()` a list of row lists, and
  iterating over a matrix yields copies of its rows. Two matrices compare
  equal when their shapes and all cells are equal. `str(matrix)` gives a
  printable table.

## The solver

`munkreskit.munkres.Munkres` holds the solver. Besides `solve(matrix)` it
exposes two preparation steps as static methods that can be used on their
own:

- `Munkres.replace_infinites(matrix)` replaces every positive infinite cell
  by one more than the largest finite value, or by `0` if every cell is
  infinite.
- `Munkres.minimize_along_direction(matrix, over_columns)` subtracts the
  minimum of each row (or, with `over_columns=True`, each column) from that
  row or column whenever the minimum is positive.

## Adapters

`munkreskit.adapters` solves problems held in other containers and writes the
result back into the same container:

```python
import numpy as np
from munkreskit.adapters import FixedShapeAdapter, NestedListAdapter, NumpyAdapter

data = [[1.0, 0.0, 1.0], [0.0, 1.0, 1.0], [1.0, 1.0, 0.0]]
NestedListAdapter().solve(data)          # data now holds 0 / -1 values

grid = [[1.0, 2.0], [0.0, 9.0]]
FixedShapeAdapter(2, 2).solve(grid)      # rows are overwritten in place

array = np.array([[1.0, 0.0], [0.0, 1.0]])
NumpyAdapter().solve(array)              # the array is filled in place
```

- `NestedListAdapter` replaces the contents of the outer list with new rows.
- `FixedShapeAdapter(rows, columns)` checks that the container has exactly
  that shape and overwrites each row in place.
- `NumpyAdapter` takes two-dimensional arrays and writes the result into the
  top-left corner of the given array.

Each adapter also provides `convert_to_matrix(container)` and
`convert_from_matrix(container, matrix)`. To support another container,
subclass `Adapter` and implement those two methods; `solve` is inherited.

## Matrix files and random matrices

`munkreskit.matrixio` reads and writes a plain-text format for collections
of matrices, and generates random test data. Each matrix is written as a
header line `Matrix (<id>) of <rows>x<columns>` followed by one indented line
per row. Values are written with six significant digits, so a matrix read
back is close to, but not always equal to, the one written.

```python
from munkreskit.matrixio import generate_random_matrix, read_matrices, write_matrices

matrices = [generate_random_matrix(5, 5, 1), generate_random_matrix(10, 10, 2)]
write_matrices(matrices, "matrices.txt")
loaded = read_matrices("matrices.txt")
assert [(m.rows, m.columns) for m in loaded] == [(5, 5), (10, 10)]
```

- `generate_random_matrix(rows, columns, seed=1)` draws values uniformly
  between 0 and the largest float; the same seed gives the same matrix.
- `format_matrix(matrix)` renders one matrix and `parse_matrices(text)` reads
  every matrix from a string; a block with a zero dimension gives an empty
  matrix, and malformed text raises `ValueError`.
- `write_matrices(matrices, path="matrices.txt")` and
  `read_matrices(path="matrices.txt")` do the same with a file.

From the command line, write one random square matrix per size given to
`matrices.txt` in the current directory:

```
munkreskit-generate 5 10 20
```

## Demonstration

Solve a random matrix, print it before and after, and report on standard
error any row or column that was not matched exactly once (rows and columns
default to 101):

```
munkreskit-example 6 6
```

The same checks are available from Python through
`munkreskit.example.random_matrix(rows, columns, rng=None)`, which fills a
matrix with random whole numbers stored as floats, and
`munkreskit.example.check_assignment(matrix)`, which returns a message for
every faulty row and column.

## What it does not do

The solver returns only the 0 / -1 assignment mask. It does not report the
total cost of the assignment or a list of matched index pairs, and there is
no command for timing the solver on a data set.

## Running the tests

```
pip install "munkreskit[test]"
pytest
```