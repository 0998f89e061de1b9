import sys

import pytest

from munkreskit.matrix import Matrix

MINUS_INF = float("-inf")
PLUS_INF = float("inf")
TINY = sys.float_info.min
HUGE = sys.float_info.max


def test_resize_1x1_to_2x2_default_value():
    matrix = Matrix.from_rows([[7.0]])
    matrix.resize(2, 2)
    assert matrix == Matrix.from_rows([[7.0, 0.0], [0.0, 0.0]])


def test_resize_1x1_to_5x5_default_value():
    matrix = Matrix.from_rows([[7.0]])
    matrix.resize(5, 5)
    expected = [[0.0] * 5 for _ in range(5)]
    expected[0][0] = 7.0
    assert matrix == Matrix.from_rows(expected)


def test_resize_5x5_to_3x3():
    matrix = Matrix.from_rows([
        [0.0, 0.1, 0.2, 0.3, 0.4],
        [1.0, 1.1, 1.2, 1.3, 1.4],
        [2.0, 2.1, 2.2, 2.3, 2.4],
        [3.0, 3.1, 3.2, 3.3, 3.4],
        [4.0, 4.1, 4.2, 4.3, 4.4],
    ])
    matrix.resize(3, 3)
    assert matrix == Matrix.from_rows([
        [0.0, 0.1, 0.2],
        [1.0, 1.1, 1.2],
        [2.0, 2.1, 2.2],
    ])


def test_resize_2x2_to_4x4_explicit_default():
    matrix = Matrix.from_rows([[0.0, 0.1], [1.0, 1.1]])
    matrix.resize(4, 4, 9.9)
    assert matrix == Matrix.from_rows([
        [0.0, 0.1, 9.9, 9.9],
        [1.0, 1.1, 9.9, 9.9],
        [9.9, 9.9, 9.9, 9.9],
        [9.9, 9.9, 9.9, 9.9],
    ])


def test_resize_empty_matrix_fills_with_zero():
    matrix = Matrix()
    matrix.resize(2, 3, 5.0)
    assert matrix.to_lists() == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2)])
def test_resize_requires_positive_shape(rows, columns):
    with pytest.raises(ValueError):
        Matrix.from_rows([[1.0]]).resize(rows, columns)


def test_clear_1x1():
    matrix = Matrix.from_rows([[7.0]])
    matrix.clear()
    assert matrix == Matrix.from_rows([[0.0]])


def test_clear_4x4():
    matrix = Matrix.from_rows([
        [1.1, 1.2, 1.3, 1.4],
        [2.1, 2.2, 2.3, 2.4],
        [3.1, 3.2, 3.3, 3.4],
        [4.1, 4.2, 4.3, 4.4],
    ])
    matrix.clear()
    assert matrix == Matrix.from_rows([[0.0] * 4 for _ in range(4)])


def test_copy_of_empty_matrix():
    empty = Matrix.from_rows([])
    copied = empty.copy()
    assert copied == empty
    assert (copied.rows, copied.columns) == (0, 0)


def test_copy_3x3_is_equal_and_independent():
    original = Matrix.from_rows([
        [0.0, 0.1, 0.2],
        [1.0, 1.1, 1.2],
        [2.0, 2.1, 2.2],
    ])
    copied = original.copy()
    assert copied == original
    copied[0, 0] = 42.0
    assert original[0, 0] == 0.0


def test_subscript():
    matrix = Matrix.from_rows([
        [0.0, 0.1, 0.2],
        [1.0, 1.1, 1.2],
        [2.0, 2.1, 2.2],
    ])
    expected = {
        (0, 0): 0.0, (0, 1): 0.1, (0, 2): 0.2,
        (1, 0): 1.0, (1, 1): 1.1, (1, 2): 1.2,
        (2, 0): 2.0, (2, 1): 2.1, (2, 2): 2.2,
    }
    for key, value in expected.items():
        assert matrix[key] == pytest.approx(value)


def test_setitem_changes_value():
    matrix = Matrix(2, 2)
    matrix[1, 0] = 3.5
    assert matrix.to_lists() == [[0, 0], [3.5, 0]]


@pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_subscript_out_of_range(key):
    with pytest.raises(IndexError):
        Matrix(2, 2).__getitem__(key)


@pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_setitem_out_of_range_leaves_matrix_unchanged(key):
    matrix = Matrix(2, 2)
    with pytest.raises(IndexError):
        matrix.__setitem__(key, 1.0)
    assert matrix.to_lists() == [[0, 0], [0, 0]]


def test_max_1x1():
    assert Matrix.from_rows([[0.0]]).max() == pytest.approx(0.0)


def test_max_2x2_minus_infinity():
    matrix = Matrix.from_rows([[MINUS_INF, MINUS_INF], [MINUS_INF, MINUS_INF]])
    assert matrix.max() == MINUS_INF


def test_max_2x2_negative():
    matrix = Matrix.from_rows([[TINY, MINUS_INF], [MINUS_INF, TINY]])
    assert matrix.max() == TINY


def test_max_2x2_zero():
    matrix = Matrix.from_rows([[0.0, MINUS_INF], [MINUS_INF, TINY]])
    assert matrix.max() == pytest.approx(0.0)


def test_max_2x2_positive():
    matrix = Matrix.from_rows([[TINY, MINUS_INF], [HUGE, 0.0]])
    assert matrix.max() == HUGE


def test_max_2x2_plus_infinity():
    matrix = Matrix.from_rows([[MINUS_INF, HUGE], [TINY, PLUS_INF]])
    assert matrix.max() == PLUS_INF


def test_min_2x2():
    matrix = Matrix.from_rows([[3.0, -2.0], [5.0, 0.0]])
    assert matrix.min() == -2.0


def test_min_max_of_empty_matrix_raise():
    with pytest.raises(ValueError):
        Matrix().min()
    with pytest.raises(ValueError):
        Matrix().max()


def test_minsize_rows_is_min():
    assert Matrix(1, 2).minsize == 1


def test_minsize_columns_is_min():
    assert Matrix(2, 1).minsize == 1


def test_minsize_equal():
    assert Matrix(3, 3).minsize == 3


def test_columns_and_rows():
    matrix = Matrix.from_rows([
        [0.0, 0.1, 0.2],
        [1.0, 1.1, 1.2],
    ])
    assert matrix.columns == 3
    assert matrix.rows == 2


def test_new_matrix_is_zero_filled():
    assert Matrix(2, 3).to_lists() == [[0, 0, 0], [0, 0, 0]]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1.0, 2.0], [3.0]])


def test_inequality_of_different_shapes():
    assert not (Matrix(2, 3) == Matrix(3, 2))


def test_inequality_of_different_values():
    solved = Matrix.from_rows([[-1.0, 0.0], [0.0, -1.0]])
    wrong = Matrix.from_rows([[0.0, -1.0], [0.0, -1.0]])
    assert not (solved == wrong)


def test_to_lists_returns_copy():
    matrix = Matrix.from_rows([[1.0, 2.0]])
    lists = matrix.to_lists()
    lists[0][0] = 9.0
    assert matrix[0, 0] == 1.0


def test_str_format():
    matrix = Matrix.from_rows([[1.0, 2.5], [-3.0, 10.0]])
    assert str(matrix) == "Matrix:\n       1,     2.5,\n      -3,      10,\n"