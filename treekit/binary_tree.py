"""An immutable-shape binary tree and a yes/no question game built on it."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, TextIO


@dataclass
class _Node:
    data: str
    left: _Node | None = None
    right: _Node | None = None


class BinaryTree:
    """A binary tree of strings; an empty tree is built with no root data."""

    def __init__(
        self,
        root_data: str | None = None,
        left: BinaryTree | None = None,
        right: BinaryTree | None = None,
    ) -> None:
        if root_data is None:
            self._root: _Node | None = None
        else:
            self._root = _Node(
                root_data,
                left._root if left is not None else None,
                right._root if right is not None else None,
            )

    @classmethod
    def _from_node(cls, node: _Node | None) -> BinaryTree:
        tree = cls()
        tree._root = node
        return tree

    def empty(self) -> bool:
        """Return True if the tree has no nodes."""
        return self._root is None

    @property
    def data(self) -> str:
        """The root's data, or an empty string for an empty tree."""
        return self._root.data if self._root is not None else ""

    @property
    def left(self) -> BinaryTree:
        """The left subtree (empty if there is none)."""
        return self._from_node(self._root.left if self._root is not None else None)

    @property
    def right(self) -> BinaryTree:
        """The right subtree (empty if there is none)."""
        return self._from_node(self._root.right if self._root is not None else None)

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return _height(self._root)


def _height(node: _Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def animal_question_tree() -> BinaryTree:
    """Return the animal-guessing decision tree."""
    return BinaryTree(
        "Is it a mammal?",
        BinaryTree(
            "Does it have stripes?",
            BinaryTree(
                "Is it a carnivore?",
                BinaryTree("It is a tiger."),
                BinaryTree("It is a zebra."),
            ),
            BinaryTree("It is a pig."),
        ),
        BinaryTree(
            "Does it fly?",
            BinaryTree("It is an eagle."),
            BinaryTree(
                "Does it swim?",
                BinaryTree("It is a penguin."),
                BinaryTree("It is an ostrich."),
            ),
        ),
    )


def play(tree: BinaryTree, read_answer: Callable[[], str], output: TextIO) -> str:
    """Walk the tree asking questions until a leaf is reached.

    ``read_answer`` returns one reply per call; replies other than ``y`` or
    ``n`` cause the question to be asked again. The leaf's text is written to
    ``output`` and returned.
    """
    while True:
        left, right = tree.left, tree.right
        if left.empty() and right.empty():
            output.write(tree.data + "\n")
            return tree.data
        while True:
            output.write(f"{tree.data} (y/n): ")
            output.flush()
            response = read_answer().strip()
            if response in ("y", "n"):
                break
        tree = left if response == "y" else right


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line


def main(argv: list[str] | None = None) -> int:
    """Play the animal-guessing game on standard input and output."""
    try:
        play(animal_question_tree(), _read_stdin, sys.stdout)
    except EOFError:
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())