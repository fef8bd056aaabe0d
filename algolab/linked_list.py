"""A singly linked list of integers with tail and ordered insertion."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class _Cell:
    value: int
    next: Optional["_Cell"] = None


class LinkedList:
    """Singly linked list built from cons cells."""

    def __init__(self) -> None:
        self._head: Optional[_Cell] = None

    def append(self, x: int) -> None:
        """Add ``x`` at the tail."""
        new = _Cell(x)
        if self._head is None:
            self._head = new
            return
        cell = self._head
        while cell.next is not None:
            cell = cell.next
        cell.next = new

    def pop_tail(self) -> Optional[int]:
        """Remove and return the last value, or None if the list is empty."""
        if self._head is None:
            return None
        if self._head.next is None:
            value = self._head.value
            self._head = None
            return value
        cell = self._head
        while cell.next is not None and cell.next.next is not None:
            cell = cell.next
        assert cell.next is not None
        value = cell.next.value
        cell.next = None
        return value

    def insert_sorted(self, x: int) -> None:
        """Insert ``x`` before the first value that is not smaller than it."""
        if self._head is None or x <= self._head.value:
            self._head = _Cell(x, self._head)
            return
        cell = self._head
        while cell.next is not None and x > cell.next.value:
            cell = cell.next
        cell.next = _Cell(x, cell.next)

    def __iter__(self) -> Iterator[int]:
        cell = self._head
        while cell is not None:
            yield cell.value
            cell = cell.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def main(argv: Optional[List[str]] = None) -> int:
    """Run a short demonstration of the list operations."""
    argparse.ArgumentParser(description="Linked list demonstration.").parse_args(argv)
    lista = LinkedList()
    lista.append(1)
    lista.append(2)
    print(f"Após inserir 1 e 2: {lista!r}")
    lista.pop_tail()
    print(f"Após remover a cauda: {lista!r}")
    for value in (213, 215, 10, 0):
        lista.insert_sorted(value)
    print(f"Após inserções ordenadas: {lista!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())