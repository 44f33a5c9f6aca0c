"""A general tree whose nodes may have any number of children."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class _Node:
    data: str
    children: list[_Node] = field(default_factory=list)

    def size(self) -> int:
        return 1 + sum(child.size() for child in self.children)


class Tree:
    """A tree of strings; subtrees added to it stay shared with their owners."""

    def __init__(self, root_data: str | None = None) -> None:
        self._root: _Node | None = None if root_data is None else _Node(root_data)

    def add_subtree(self, subtree: Tree) -> None:
        """Attach ``subtree`` as the last child of the root; empty trees are ignored."""
        if self._root is not None and subtree._root is not None:
            self._root.children.append(subtree._root)

    def size(self) -> int:
        """Return the number of nodes."""
        return 0 if self._root is None else self._root.size()

    def print(self, file: TextIO | None = None) -> None:
        """Write each node's data on its own line, in preorder."""
        out = sys.stdout if file is None else file
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            out.write(node.data + "\n")
            stack.extend(reversed(node.children))


def main(argv: list[str] | None = None) -> int:
    """Build a small family tree and print its size."""
    t1 = Tree("Anne")
    t2 = Tree("Peter")
    t1.add_subtree(t2)
    t3 = Tree("Zara")
    t1.add_subtree(t3)
    t4 = Tree("Savannah")
    t2.add_subtree(t4)
    t5 = Tree("Joe")
    t1.add_subtree(t5)
    print(f"Size: {t1.size()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())