"""A plain binary search tree of distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass
class _Node:
    value: Any
    left: "_Node | None" = None
    right: "_Node | None" = None


class BinarySearchTree:
    """Unbalanced binary search tree; inserting a present value does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` unless it is already in the tree."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            else:
                return

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self)