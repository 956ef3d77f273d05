import pytest

from drills.offsets import offset_differences


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 3, 5, 7], [2, 2, 2, -6]),
        ([1, 3, 5], [2, 2, -4]),
        ([1, 3], [2, -2]),
    ],
)
def test_offset_one(values, expected):
    assert offset_differences(1, values) == expected


@pytest.mark.parametrize(
    "offset, expected",
    [
        (2, [4, 4, -4, -4]),
        (3, [6, -2, -2, -2]),
        (4, [0, 0, 0, 0]),
        (5, [2, 2, 2, -6]),
    ],
)
def test_larger_offsets(offset, expected):
    assert offset_differences(offset, [1, 3, 5, 7]) == expected


def test_custom_type():
    assert offset_differences(1, [1.0, 11.0, 5.0, 0.0]) == [10.0, -6.0, -5.0, 1.0]


def test_degenerate_cases():
    assert offset_differences(1, [0]) == [0]
    assert offset_differences(1, [1]) == [0]
    assert offset_differences(1, []) == []


def test_accepts_any_iterable():
    assert offset_differences(1, iter((1, 3, 5, 7))) == [2, 2, 2, -6]


def test_differences_sum_to_zero():
    values = [4, 9, -2, 17, 3]
    for offset in range(7):
        assert sum(offset_differences(offset, values)) == 0