"""Differences between elements of a sequence and its rotated self."""

from __future__ import annotations

from itertools import cycle, islice
from typing import Iterable, TypeVar

N = TypeVar("N")


def offset_differences(offset: int, values: Iterable[N]) -> list[N]:
    """Return ``values[(n + offset) % len] - values[n]`` for every ``n``.

    The offset wraps around from the end of ``values`` to the beginning.
    """
    items = list(values)
    shifted = islice(cycle(items), offset, None)
    return [later - earlier for earlier, later in zip(items, shifted)]