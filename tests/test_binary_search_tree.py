import io
import random

import pytest

from treekit.binary_search_tree import BinarySearchTree, main


def build(letters):
    tree = BinarySearchTree()
    for letter in letters:
        tree.insert(letter)
    return tree


def test_book_example():
    tree = build("DBACFEIGHJ")
    for letter in "ABFD":
        tree.erase(letter)
    assert list(tree) == ["C", "E", "G", "H", "I", "J"]
    assert tree.count("A") == 0
    assert tree.count("J") == 1


def test_print_writes_in_order():
    tree = build("DBACFEIGHJ")
    for letter in "ABFD":
        tree.erase(letter)
    buf = io.StringIO()
    tree.print(buf)
    assert buf.getvalue().split() == ["C", "E", "G", "H", "I", "J"]
    assert buf.getvalue().endswith("\n")


def test_duplicates_are_ignored():
    tree = build(["b", "a", "b", "c", "a"])
    assert list(tree) == ["a", "b", "c"]


def test_contains_and_count_agree():
    tree = build(["m", "c", "x"])
    for element in ["m", "c", "x", "a", "z"]:
        assert (element in tree) == (tree.count(element) == 1)


def test_erase_missing_is_noop():
    tree = build("DBF")
    tree.erase("Q")
    assert list(tree) == ["B", "D", "F"]


def test_erase_root_until_empty():
    tree = build("DBFACEG")
    remaining = sorted("DBFACEG")
    while remaining:
        root_like = remaining[len(remaining) // 2]
        tree.erase(root_like)
        remaining.remove(root_like)
        assert list(tree) == remaining
    assert list(tree) == []


@pytest.mark.parametrize("seed", range(5))
def test_random_inserts_and_erases_stay_sorted(seed):
    rng = random.Random(seed)
    words = [f"w{rng.randrange(100):02d}" for _ in range(60)]
    tree = build(words)
    expected = set(words)
    assert list(tree) == sorted(expected)
    for word in rng.sample(sorted(expected), len(expected) // 2):
        tree.erase(word)
        expected.discard(word)
        assert list(tree) == sorted(expected)
    for word in words:
        assert (word in tree) == (word in expected)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["C", "E", "G", "H", "I", "J"]
    assert lines[2] == "0 1"