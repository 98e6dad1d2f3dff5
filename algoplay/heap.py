"""A binary max-heap with a small demonstration command."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

CAPACITY = 5000
"""Maximum number of elements the heap holds."""

_DEMO_VALUES = (2, 5, 3, 1, 7)


class MaxHeap:
    """Max-heap of integers whose positions are numbered from 1."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, value: int) -> None:
        """Add a value and restore the heap order."""
        if len(self._items) >= CAPACITY:
            raise OverflowError("heap is full")
        items = self._items
        items.append(value)
        pos = len(items) - 1
        while pos > 0:
            parent = (pos - 1) // 2
            if not items[parent] < items[pos]:
                break
            items[parent], items[pos] = items[pos], items[parent]
            pos = parent

    def delete_root(self) -> int:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("delete from an empty heap")
        root = items[0]
        last = items.pop()
        if not items:
            return root
        items[0] = last
        size = len(items)
        pos = 0
        while True:
            left = 2 * pos + 1
            right = left + 1
            if left >= size:
                break
            child = left
            if right < size and not items[left] > items[right]:
                child = right
            if not items[pos] < items[child]:
                break
            items[pos], items[child] = items[child], items[pos]
            pos = child
        return root

    def describe(self, start: int = 1) -> list[tuple[int, int]]:
        """Return (position, value) pairs of the subtree at ``start`` in preorder."""
        result: list[tuple[int, int]] = []
        pending = [start]
        size = len(self._items)
        while pending:
            pos = pending.pop()
            if not 1 <= pos <= size:
                continue
            result.append((pos, self._items[pos - 1]))
            pending.append(2 * pos + 1)
            pending.append(2 * pos)
        return result

    def drain(self) -> Iterator[int]:
        """Yield the values from largest to smallest, emptying the heap."""
        while self._items:
            yield self.delete_root()


def _print_tree(heap: MaxHeap) -> None:
    for pos, value in heap.describe(1):
        print(f"{pos} : {value}")


def main(argv: list[str] | None = None) -> int:
    """Insert values, show the tree, drop the root and print the rest in order."""
    parser = argparse.ArgumentParser(description="Max-heap demonstration.")
    parser.add_argument("values", nargs="*", type=int, help="values to insert")
    args = parser.parse_args(argv)
    values = args.values or list(_DEMO_VALUES)

    heap = MaxHeap()
    for value in values:
        heap.insert(value)
        _print_tree(heap)
        print()

    heap.delete_root()
    _print_tree(heap)
    print()

    print(" ".join(str(value) for value in heap.drain()))
    return 0