# treekit

A small collection of tree data structures in pure Python, with no runtime
dependencies:

- `treekit.tree.Tree`: a general tree whose nodes may have any number of
  children.
- `treekit.traversal_tree.Tree`: a general tree with preorder, postorder and
  breadth-first traversal, through visitors or by iterating.
- `treekit.binary_tree.BinaryTree`: a binary tree of strings, with an
  animal-guessing game built on it.
- `treekit.binary_search_tree.BinarySearchTree`: an unbalanced binary search
  tree of strings.
- `treekit.red_black_tree.RedBlackTree`: a self-balancing red-black tree of
  strings.
- `treekit.red_black_check`: consistency checks and exhaustive insertion and
  removal tests for the red-black tree.
- `treekit.huffman_tree.HuffmanTree`: a Huffman code built from character
  frequencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Binary search tree

```python
from treekit.binary_search_tree import BinarySearchTree

t = BinarySearchTree()
for letter in "DBACFEIGHJ":
    t.insert(letter)
for letter in "ABFD":
    t.erase(letter)

print(list(t))       # ['C', 'E', 'G', 'H', 'I', 'J']
print(t.count("A"))  # 0
print("J" in t)      # True
t.print()            # C E G H I J
```

Duplicates are ignored on insert, and erasing an element that is not present
does nothing. `print(file=None)` writes the elements in order, each followed by
a space, then a newline, to standard output or to the given file.

### Red-black tree

`RedBlackTree` has the same interface as `BinarySearchTree` (`insert`,
`count`, `erase`, iteration in sorted order, `in`, `print`) but keeps itself
balanced. Its `root` and the `Node` class (`data`, `left`, `right`, `parent`,
`color`, `set_left_child`, `set_right_child`) are public so that trees can be
inspected or built by hand.

```python
from treekit.red_black_tree import RedBlackTree
from treekit.red_black_check import check_red_black

t = RedBlackTree()
for letter in "DBACFEIGHJ":
    t.insert(letter)
t.erase("D")
print(list(t))             # ['A', 'B', 'C', 'E', 'F', 'G', 'H', 'I', 'J']
print(check_red_black(t))  # True
```

`check_red_black(tree, report_errors=False)` returns whether the tree satisfies
the red-black and ordering properties; with `report_errors` it prints the first
violation found. The module also offers `insertion_test(letters)`,
`removal_test(tree)`, `removal_test_template()` and `book_example()`, together
with helpers such as `copy_tree`, `mirror_tree`, `full_tree`, `inorder_nodes`,
`subtree_size`, `cost_to_root` and `populate`.

### Huffman codes

```python
from treekit.huffman_tree import HuffmanTree, encode

tree = HuffmanTree({"A": 2089, "H": 357, "L": 354, "O": 844})
codes = tree.encoding_map()
bits = encode("ALOHA", codes)
print(tree.decode(bits))  # ALOHA
```

`encode` raises `KeyError` for a character with no code. `decode` treats any
character other than `0` as a `1`, ignores bits left over after the last
complete code, and raises `ValueError` for an empty tree.

### General trees and traversal

```python
from treekit.traversal_tree import Tree, ShortNameCounter

anne = Tree("Anne")
peter = Tree("Peter")
anne.add_subtree(peter)
anne.add_subtree(Tree("Zara"))
peter.add_subtree(Tree("Savannah"))

print(anne.size())   # 4
print(list(anne))    # breadth first: ['Anne', 'Peter', 'Zara', 'Savannah']

counter = ShortNameCounter()
anne.preorder(counter)
print(counter.count)  # 3
```

Write your own visitor by subclassing `treekit.traversal_tree.Visitor` and
overriding `visit(data)`; `Printer(file=None)` writes each item followed by a
space. Subtrees stay shared with the tree they were added to. Adding a subtree
to an empty `traversal_tree.Tree` raises `ValueError`, while
`treekit.tree.Tree` silently ignores it; `treekit.tree.Tree.print(file=None)`
writes each node on its own line in preorder.

### Binary tree and the guessing game

```python
import io
from treekit.binary_tree import animal_question_tree, play

answers = iter(["y", "y", "n"])
result = play(animal_question_tree(), lambda: next(answers), io.StringIO())
print(result)  # It is a zebra.
```

`BinaryTree(root_data=None, left=None, right=None)` has `empty()`, `height()`
and the properties `data`, `left` and `right`. `play` asks again whenever the
reply is neither `y` nor `n`.

## Commands

Each demonstration can be run from the command line:

```
treekit-tree              # builds a family tree and prints its size
treekit-binary-tree       # plays the animal-guessing game (answer y/n)
treekit-bst               # inserts and erases letters in a binary search tree
treekit-huffman           # encodes and decodes "ALOHA" with a Huffman code
treekit-traversal         # shows preorder, postorder and breadth-first traversal
treekit-red-black-check   # runs the red-black tree insertion and removal checks
```

The commands take no options. `treekit-red-black-check` tries every
permutation of ten letters and may take a little while.