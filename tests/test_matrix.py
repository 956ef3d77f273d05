import pytest

from drills.matrix import transpose

MATRIX = [[101, 102, 103], [201, 202, 203], [301, 302, 303]]
EXPECTED = [[101, 201, 301], [102, 202, 302], [103, 203, 303]]


def test_transpose():
    assert transpose(MATRIX) == EXPECTED


def test_transpose_twice_is_identity():
    assert transpose(transpose(MATRIX)) == MATRIX


def test_transpose_does_not_modify_input():
    original = [list(row) for row in MATRIX]
    transpose(MATRIX)
    assert MATRIX == original


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2, 3], [4, 5]])