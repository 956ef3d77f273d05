"""Matrix transposition."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the transpose of a rectangular matrix.

    Raises ValueError if the rows differ in length.
    """
    return [list(column) for column in zip(*matrix, strict=True)]