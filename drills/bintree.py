"""A set of ordered values stored in an unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


class BinaryTree(Generic[T]):
    """A container of values kept in a binary tree; duplicates are stored once."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, value: T) -> None:
        """Add a value unless an equal one is already stored."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    self._size += 1
                    return
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = _Node(value)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def has(self, value: T) -> bool:
        """Return True if an equal value is stored."""
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return True
        return False

    def __contains__(self, value: object) -> bool:
        return self.has(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size