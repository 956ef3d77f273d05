"""Citations ordered by author and year, and a generic minimum."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar


class LessThan(Protocol):
    """Anything that can say whether it sorts before another of its kind."""

    def less_than(self, other) -> bool:
        """Return True if self is less than other."""
        ...


T = TypeVar("T", bound=LessThan)


@dataclass(frozen=True)
class Citation:
    """A reference to a work by an author in a given year."""

    author: str
    year: int

    def less_than(self, other: Citation) -> bool:
        """Order by author first, then by year."""
        return (self.author, self.year) < (other.author, other.year)


def minimum(left: T, right: T) -> T:
    """Return ``left`` if it is less than ``right``, otherwise ``right``."""
    return left if left.less_than(right) else right