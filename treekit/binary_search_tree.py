"""An unbalanced binary search tree of strings."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, TextIO


@dataclass
class _Node:
    data: str
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree that holds each element at most once."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, element: str) -> None:
        """Add ``element``; an element already present is left alone."""
        new_node = _Node(element)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if element < node.data:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            elif element > node.data:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right
            else:
                return

    def count(self, element: str) -> int:
        """Return 1 if ``element`` is in the tree, otherwise 0."""
        node = self._root
        while node is not None:
            if element < node.data:
                node = node.left
            elif element > node.data:
                node = node.right
            else:
                return 1
        return 0

    def __contains__(self, element: object) -> bool:
        return self.count(element) == 1  # type: ignore[arg-type]

    def erase(self, element: str) -> None:
        """Remove ``element`` if it is present."""
        parent: _Node | None = None
        target = self._root
        while target is not None and target.data != element:
            parent = target
            target = target.left if element < target.data else target.right
        if target is None:
            return

        if target.left is None or target.right is None:
            new_child = target.right if target.left is None else target.left
            if parent is None:
                self._root = new_child
            elif parent.left is target:
                parent.left = new_child
            else:
                parent.right = new_child
            return

        # Both subtrees present: replace with the smallest of the right subtree.
        smallest_parent = target
        smallest = target.right
        while smallest.left is not None:
            smallest_parent = smallest
            smallest = smallest.left
        target.data = smallest.data
        if smallest_parent is target:
            smallest_parent.right = smallest.right
        else:
            smallest_parent.left = smallest.right

    def __iter__(self) -> Iterator[str]:
        """Yield the elements in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def print(self, file: TextIO | None = None) -> None:
        """Write the elements in order, each followed by a space, then a newline."""
        out = sys.stdout if file is None else file
        out.write("".join(f"{data} " for data in self) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Build the demonstration tree, erase some letters and print the result."""
    tree = BinarySearchTree()
    for letter in "DBACFEIGHJ":
        tree.insert(letter)
    for letter in "ABFD":
        tree.erase(letter)
    tree.print()
    print("Expected: C E G H I J")
    print(f"{tree.count('A')} {tree.count('J')}")
    print("Expected: 0 1")
    return 0


if __name__ == "__main__":
    sys.exit(main())