"""A red-black tree of strings with insertion and removal."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

BLACK = 1
RED = 0
NEGATIVE_RED = -1
DOUBLE_BLACK = 2


class Node:
    """A tree node; colours are integers so they can be raised and lowered."""

    __slots__ = ("data", "left", "right", "parent", "color")

    def __init__(self, data: str = "") -> None:
        self.data = data
        self.left: Node | None = None
        self.right: Node | None = None
        self.parent: Node | None = None
        self.color = RED

    def set_left_child(self, child: Node | None) -> None:
        """Make ``child`` the left child and point its parent link here."""
        self.left = child
        if child is not None:
            child.parent = self

    def set_right_child(self, child: Node | None) -> None:
        """Make ``child`` the right child and point its parent link here."""
        self.right = child
        if child is not None:
            child.parent = self

    def __repr__(self) -> str:
        return f"Node({self.data!r}, color={self.color})"


class RedBlackTree:
    """A balanced binary search tree holding each element at most once."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, element: str) -> None:
        """Add ``element``; an element already present is left alone."""
        new_node = Node(element)
        if self.root is None:
            self.root = new_node
        elif not self._attach(new_node):
            return
        self._fix_after_add(new_node)

    def count(self, element: str) -> int:
        """Return 1 if ``element`` is in the tree, otherwise 0."""
        node = self.root
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
        node = self.root
        while node is not None and node.data != element:
            node = node.left if element < node.data else node.right
        if node is None:
            return

        if node.left is None or node.right is None:
            new_child = node.right if node.left is None else node.left
            self._fix_before_remove(node)
            self._replace_with(node, new_child)
            return

        smallest = node.right
        while smallest.left is not None:
            smallest = smallest.left
        node.data = smallest.data
        self._fix_before_remove(smallest)
        self._replace_with(smallest, smallest.right)

    def __iter__(self) -> Iterator[str]:
        """Yield the elements in ascending order."""
        stack: list[Node] = []
        node = self.root
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

    def _attach(self, new_node: Node) -> bool:
        node = self.root
        assert node is not None
        while True:
            if new_node.data < node.data:
                if node.left is None:
                    node.set_left_child(new_node)
                    return True
                node = node.left
            elif new_node.data > node.data:
                if node.right is None:
                    node.set_right_child(new_node)
                    return True
                node = node.right
            else:
                return False

    def _replace_with(self, to_be_replaced: Node, replacement: Node | None) -> None:
        parent = to_be_replaced.parent
        if parent is None:
            if replacement is not None:
                replacement.parent = None
            self.root = replacement
        elif to_be_replaced is parent.left:
            parent.set_left_child(replacement)
        else:
            parent.set_right_child(replacement)

    def _fix_after_add(self, new_node: Node) -> None:
        if new_node.parent is None:
            new_node.color = BLACK
            return
        new_node.color = RED
        if new_node.parent.color == RED:
            self._fix_double_red(new_node)

    def _fix_before_remove(self, node: Node) -> None:
        if node.color == RED:
            return
        if node.left is not None or node.right is not None:
            child = node.right if node.left is None else node.left
            child.color = BLACK
        else:
            self._bubble_up(node.parent)

    def _bubble_up(self, parent: Node | None) -> None:
        while parent is not None:
            parent.color += 1
            parent.left.color -= 1
            parent.right.color -= 1
            if self._bubble_up_fix(parent.left) or self._bubble_up_fix(parent.right):
                return
            if parent.color != DOUBLE_BLACK:
                return
            if parent.parent is None:
                parent.color = BLACK
                return
            parent = parent.parent

    def _bubble_up_fix(self, child: Node) -> bool:
        if child.color == NEGATIVE_RED:
            self._fix_negative_red(child)
            return True
        if child.color == RED:
            if child.left is not None and child.left.color == RED:
                self._fix_double_red(child.left)
                return True
            if child.right is not None and child.right.color == RED:
                self._fix_double_red(child.right)
                return True
        return False

    def _fix_double_red(self, child: Node) -> None:
        while True:
            parent = child.parent
            grandparent = parent.parent
            if grandparent is None:
                parent.color = BLACK
                return
            if parent is grandparent.left:
                n3, t4 = grandparent, grandparent.right
                if child is parent.left:
                    n1, n2 = child, parent
                    t1, t2, t3 = child.left, child.right, parent.right
                else:
                    n1, n2 = parent, child
                    t1, t2, t3 = parent.left, child.left, child.right
            else:
                n1, t1 = grandparent, grandparent.left
                if child is parent.left:
                    n2, n3 = child, parent
                    t2, t3, t4 = child.left, child.right, parent.right
                else:
                    n2, n3 = parent, child
                    t2, t3, t4 = parent.left, child.left, child.right

            self._replace_with(grandparent, n2)
            n1.set_left_child(t1)
            n1.set_right_child(t2)
            n2.set_left_child(n1)
            n2.set_right_child(n3)
            n3.set_left_child(t3)
            n3.set_right_child(t4)
            n2.color = grandparent.color - 1
            n1.color = BLACK
            n3.color = BLACK

            if n2 is self.root:
                n2.color = BLACK
                return
            if n2.color == RED and n2.parent.color == RED:
                child = n2
                continue
            return

    def _fix_negative_red(self, neg_red: Node) -> None:
        parent = neg_red.parent
        if parent.left is neg_red:
            n1, n2, n3, n4 = neg_red.left, neg_red, neg_red.right, parent
            t1, t2, t3 = n3.left, n3.right, n4.right
            n1.color = RED
            n2.color = BLACK
            n4.color = BLACK
            self._replace_with(n4, n3)
            n3.set_left_child(n2)
            n3.set_right_child(n4)
            n2.set_left_child(n1)
            n2.set_right_child(t1)
            n4.set_left_child(t2)
            n4.set_right_child(t3)
            child = n1
        else:
            n4, n3, n2, n1 = neg_red.right, neg_red, neg_red.left, parent
            t3, t2, t1 = n2.right, n2.left, n1.left
            n4.color = RED
            n3.color = BLACK
            n1.color = BLACK
            self._replace_with(n1, n2)
            n2.set_right_child(n3)
            n2.set_left_child(n1)
            n3.set_right_child(n4)
            n3.set_left_child(t3)
            n1.set_right_child(t2)
            n1.set_left_child(t1)
            child = n4

        if child.left is not None and child.left.color == RED:
            self._fix_double_red(child.left)
        elif child.right is not None and child.right.color == RED:
            self._fix_double_red(child.right)