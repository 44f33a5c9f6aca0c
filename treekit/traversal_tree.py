"""A general tree with visitor-based and breadth-first traversal."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, TextIO


class Visitor:
    """Receives the data of each node during a traversal; does nothing by default."""

    def visit(self, data: str) -> None:
        """Handle the data of one node."""


class Printer(Visitor):
    """Writes each visited item followed by a space."""

    def __init__(self, file: TextIO | None = None) -> None:
        self.file = file

    def visit(self, data: str) -> None:
        out = sys.stdout if self.file is None else self.file
        out.write(f"{data} ")


class ShortNameCounter(Visitor):
    """Counts visited items that are at most five characters long."""

    def __init__(self) -> None:
        self.count = 0

    def visit(self, data: str) -> None:
        if len(data) <= 5:
            self.count += 1


@dataclass(eq=False)
class _Node:
    data: str
    children: list[_Node] = field(default_factory=list)


class Tree:
    """A tree of strings; subtrees added to it stay shared with their owners."""

    def __init__(self, root_data: str | None = None) -> None:
        self._root: _Node | None = None if root_data is None else _Node(root_data)

    def add_subtree(self, subtree: Tree) -> None:
        """Attach ``subtree`` as the last child of the root.

        Adding to an empty tree raises ValueError; an empty subtree is ignored.
        """
        if self._root is None:
            raise ValueError("cannot add a subtree to an empty tree")
        if subtree._root is not None:
            self._root.children.append(subtree._root)

    def size(self) -> int:
        """Return the number of nodes."""
        return sum(1 for _ in self)

    def preorder(self, visitor: Visitor) -> None:
        """Visit each node before its children."""
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            visitor.visit(node.data)
            stack.extend(reversed(node.children))

    def postorder(self, visitor: Visitor) -> None:
        """Visit each node after its children."""
        if self._root is not None:
            _postorder(self._root, visitor)

    def breadth_first(self, visitor: Visitor) -> None:
        """Visit the nodes level by level."""
        for data in self:
            visitor.visit(data)

    def __iter__(self) -> Iterator[str]:
        """Yield node data in breadth-first order."""
        if self._root is None:
            return
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node.data
            queue.extend(node.children)


def _postorder(node: _Node, visitor: Visitor) -> None:
    for child in node.children:
        _postorder(child, visitor)
    visitor.visit(node.data)


def main(argv: list[str] | None = None) -> int:
    """Demonstrate preorder, postorder and breadth-first traversal."""
    t1 = Tree("Anne")
    t2 = Tree("Peter")
    t1.add_subtree(t2)
    t3 = Tree("Zara")
    t1.add_subtree(t3)
    t4 = Tree("Savannah")
    t2.add_subtree(t4)

    printer = Printer()
    print("Preorder: ", end="")
    t1.preorder(printer)
    print()
    counter = ShortNameCounter()
    t1.preorder(counter)
    print(f"Short names: {counter.count}")
    print("Postorder: ", end="")
    t1.postorder(printer)
    print()

    short = 0
    print("Breadth first: ", end="")
    for data in t1:
        print(data, end=" ")
        if len(data) <= 5:
            short += 1
    print()
    print(f"Short names: {short}")
    return 0


if __name__ == "__main__":
    sys.exit(main())