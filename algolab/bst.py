"""An unbalanced binary search tree that keeps duplicate keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    element: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class Tree(Generic[T]):
    """Binary search tree; equal elements go to the left subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None

    def insert(self, element: T) -> None:
        """Insert an element, placing duplicates to the left."""
        new = _Node(element)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if element <= node.element:  # type: ignore[operator]
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def pop_max(self) -> Optional[T]:
        """Remove and return the largest element, or None if the tree is empty."""
        if self._root is None:
            return None
        parent: Optional[_Node[T]] = None
        node = self._root
        while node.right is not None:
            parent, node = node, node.right
        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left
        return node.element

    def remove(self, key: T) -> bool:
        """Remove one occurrence of ``key``; return whether it was found."""
        self._root, found = self._remove(self._root, key)
        return found

    @classmethod
    def _remove(
        cls, node: Optional[_Node[Any]], key: Any
    ) -> Tuple[Optional[_Node[Any]], bool]:
        if node is None:
            return None, False
        if key < node.element:
            node.left, found = cls._remove(node.left, key)
            return node, found
        if key > node.element:
            node.right, found = cls._remove(node.right, key)
            return node, found
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        min_val = successor.element
        right, _ = cls._remove(node.right, min_val)
        return _Node(min_val, node.left, right), True

    def inorder(self) -> List[T]:
        """Return the elements in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        stack: List[_Node[T]] = []
        current = self._root
        while current is not None:
            stack.append(current)
            current = current.left
        while stack:
            node = stack.pop()
            current = node.right
            while current is not None:
                stack.append(current)
                current = current.left
            yield node.element

    def __str__(self) -> str:
        lines: List[str] = []

        def walk(node: Optional[_Node[T]], depth: int) -> None:
            if node is None:
                return
            walk(node.right, depth + 1)
            lines.append("    " * depth + f"{node.element}\n")
            walk(node.left, depth + 1)

        walk(self._root, 0)
        return "".join(lines)