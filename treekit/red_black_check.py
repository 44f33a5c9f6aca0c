"""Consistency checks and exhaustive tests for the red-black tree."""

from __future__ import annotations

import sys
from itertools import pairwise
from typing import Iterator

from treekit.red_black_tree import BLACK, RED, Node, RedBlackTree


class _Violation(Exception):
    """Raised internally when a red-black property does not hold."""


def subtree_size(node: Node | None) -> int:
    """Return the number of nodes in the subtree rooted at ``node``."""
    if node is None:
        return 0
    return 1 + subtree_size(node.left) + subtree_size(node.right)


def cost_to_root(node: Node | None) -> int:
    """Return the sum of colours on the path from ``node`` up to the root."""
    cost = 0
    while node is not None:
        cost += node.color
        node = node.parent
    return cost


def copy_tree(node: Node | None) -> Node | None:
    """Return a deep copy of the subtree, keeping data and colours."""
    if node is None:
        return None
    new_node = Node(node.data)
    new_node.color = node.color
    new_node.set_left_child(copy_tree(node.left))
    new_node.set_right_child(copy_tree(node.right))
    return new_node


def mirror_tree(node: Node | None) -> Node | None:
    """Return a deep copy of the subtree with left and right swapped."""
    if node is None:
        return None
    new_node = Node(node.data)
    new_node.color = node.color
    new_node.set_left_child(mirror_tree(node.right))
    new_node.set_right_child(mirror_tree(node.left))
    return new_node


def full_tree(depth: int) -> Node | None:
    """Return a complete tree of black nodes with ``depth`` levels."""
    if depth <= 0:
        return None
    root = Node()
    root.color = BLACK
    root.set_left_child(full_tree(depth - 1))
    root.set_right_child(full_tree(depth - 1))
    return root


def inorder_nodes(node: Node | None) -> list[Node]:
    """Return the nodes of the subtree in in-order sequence."""
    result: list[Node] = []
    stack: list[Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node)
        node = node.right
    return result


def _letter(index: int) -> str:
    return chr(ord("A") + index)


def populate(tree: RedBlackTree) -> int:
    """Relabel the nodes in order as A, B, C, ... and return how many there are."""
    nodes = inorder_nodes(tree.root)
    for index, node in enumerate(nodes):
        node.data = _letter(index)
    return len(nodes)


def _black_depth(node: Node | None, is_root: bool) -> int:
    if node is None:
        return 0
    left = _black_depth(node.left, False)
    right = _black_depth(node.right, False)
    if left != right:
        raise _Violation(
            f"Left and right children of {node.data} have different black depths"
        )

    if node.parent is None:
        if not is_root:
            raise _Violation(f"{node.data} is not root and has no parent")
        if node.color != BLACK:
            raise _Violation(f"Root {node.data} is not black")
    else:
        if is_root:
            raise _Violation(f"{node.data} is root and has a parent")
        if node.color == RED and node.parent.color == RED:
            raise _Violation(f"Parent of red {node.data} is red")

    if node.left is not None and node.left.parent is not node:
        raise _Violation(f"Left child of {node.data} has bad parent link")
    if node.right is not None and node.right.parent is not node:
        raise _Violation(f"Right child of {node.data} has bad parent link")

    if node.color not in (RED, BLACK):
        raise _Violation(f"{node.data} has invalid color: {node.color}")

    return node.color + left


def check_red_black(tree: RedBlackTree, report_errors: bool = False) -> bool:
    """Return True if ``tree`` satisfies the red-black and ordering properties.

    With ``report_errors`` the first violation found is printed.
    """
    try:
        _black_depth(tree.root, True)
        for first, second in pairwise(inorder_nodes(tree.root)):
            if first.data > second.data:
                raise _Violation(f"{first.data} is larger than {second.data}")
    except _Violation as violation:
        if report_errors:
            print(violation)
        return False
    return True


def _print_detailed(node: Node | None, level: int = 0) -> None:
    if node is None:
        return
    _print_detailed(node.left, level + 1)
    print(f"{'  ' * level}{node.data} {node.color}")
    _print_detailed(node.right, level + 1)


def book_example() -> RedBlackTree:
    """Build the textbook tree, erase A, B, F and D, and return it."""
    tree = RedBlackTree()
    for letter in "DBACFEIGHJ":
        tree.insert(letter)
    for letter in "ABFD":
        tree.erase(letter)
    return tree


def _permutations_from(letters: str) -> Iterator[str]:
    """Yield ``letters`` and each following permutation in lexicographic order."""
    chars = list(letters)
    while True:
        yield "".join(chars)
        pivot = len(chars) - 2
        while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
            pivot -= 1
        if pivot < 0:
            return
        swap = len(chars) - 1
        while chars[swap] <= chars[pivot]:
            swap -= 1
        chars[pivot], chars[swap] = chars[swap], chars[pivot]
        chars[pivot + 1 :] = reversed(chars[pivot + 1 :])


def insertion_test(letters: str) -> int:
    """Insert every later permutation of ``letters`` and count the passing ones."""
    passed = 0
    for arrangement in _permutations_from(letters):
        tree = RedBlackTree()
        for letter in arrangement:
            tree.insert(letter)
        ok = True
        for letter in arrangement:
            if tree.count(letter) == 0:
                print(f"{letter} not inserted")
                ok = False
        if ok:
            passed += 1
        else:
            print(f"Failing for letters {letters}")
    return passed


def removal_test(tree: RedBlackTree) -> int:
    """Erase the black node from every colouring of ``tree`` and count passes.

    The template's root is made black, its single black non-root node is the one
    erased, and every other node is coloured red or black in each combination,
    both as given and mirrored. Only colourings that form a valid red-black tree
    once padded with black subtrees are tried.
    """
    passed = 0
    nodes_to_color = max(subtree_size(tree.root) - 2, 0)
    for builder in (copy_tree, mirror_tree):
        for pattern in range(2**nodes_to_color):
            rb = RedBlackTree()
            rb.root = builder(tree.root)
            nodes = inorder_nodes(rb.root)
            to_delete: Node | None = None
            bits = pattern
            for node in nodes:
                if node is rb.root:
                    node.color = BLACK
                elif node.color == BLACK:
                    to_delete = node
                else:
                    node.color = bits % 2
                    bits //= 2
            if to_delete is None:
                raise ValueError("template needs a black node other than the root")

            target_cost = cost_to_root(to_delete)
            for node in nodes:
                cost = target_cost - cost_to_root(node)
                if node.left is None:
                    node.set_left_child(full_tree(cost))
                if node.right is None:
                    node.set_right_child(full_tree(cost))

            filled_size = populate(rb)
            if not check_red_black(rb, False):
                continue

            deleted = to_delete.data
            rb.erase(deleted)
            ok = check_red_black(rb, True)
            for index in range(filled_size):
                letter = _letter(index)
                if rb.count(letter) == 0 and letter != deleted:
                    print(f"{letter} deleted")
                    ok = False
            if rb.count(deleted) > 0:
                print(f"{deleted} not deleted")
                ok = False
            if ok:
                passed += 1
            else:
                print("Failing tree: ")
                _print_detailed(rb.root)
    return passed


def removal_test_template() -> RedBlackTree:
    """Return the nine-node tree shape used by the removal test."""
    nodes = [Node() for _ in range(9)]
    result = RedBlackTree()
    result.root = nodes[7]
    nodes[7].set_left_child(nodes[1])
    nodes[7].set_right_child(nodes[8])
    nodes[1].set_left_child(nodes[0])
    nodes[1].set_right_child(nodes[3])
    nodes[3].set_left_child(nodes[2])
    nodes[3].set_right_child(nodes[5])
    nodes[5].set_left_child(nodes[4])
    nodes[5].set_right_child(nodes[6])
    for node in nodes:
        node.color = RED
    nodes[2].color = BLACK
    return result


def main(argv: list[str] | None = None) -> int:
    """Run the book example, the insertion test and the removal test."""
    book_example().print()
    print("Expected: C E G H I J")

    passing = insertion_test("ABCDEFGHIJ")
    print(f"{passing} insertion tests passed.")

    passing = removal_test(removal_test_template())
    print(f"{passing} removal tests passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())