"""Counting how often each value has been seen."""

from __future__ import annotations

from collections import Counter as _Tally
from typing import Generic, Hashable, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)


class Counter(Generic[T]):
    """Counts the number of times each value has been seen."""

    def __init__(self) -> None:
        self._values: _Tally[T] = _Tally()

    def count(self, value: T) -> None:
        """Count an occurrence of the given value."""
        self._values[value] += 1

    def times_seen(self, value: T) -> int:
        """Return the number of times the given value has been seen."""
        return self._values.get(value, 0)


def main(argv: Sequence[str] | None = None) -> None:
    """Count some numbers and fruit and print the tallies."""
    ctr: Counter[int] = Counter()
    for value in (13, 14, 16, 14, 14, 11):
        ctr.count(value)
    for i in range(10, 20):
        print(f"saw {ctr.times_seen(i)} values equal to {i}")

    strctr: Counter[str] = Counter()
    for fruit in ("apple", "orange", "apple"):
        strctr.count(fruit)
    print(f"got {strctr.times_seen('apple')} apples")


if __name__ == "__main__":
    main()