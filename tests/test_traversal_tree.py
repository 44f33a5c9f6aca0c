import io

import pytest

from treekit.traversal_tree import (
    Printer,
    ShortNameCounter,
    Tree,
    Visitor,
    main,
)


class Recorder(Visitor):
    def __init__(self):
        self.seen = []

    def visit(self, data):
        self.seen.append(data)


def family():
    t1 = Tree("Anne")
    t2 = Tree("Peter")
    t1.add_subtree(t2)
    t3 = Tree("Zara")
    t1.add_subtree(t3)
    t4 = Tree("Savannah")
    t2.add_subtree(t4)
    return t1


def test_preorder():
    rec = Recorder()
    family().preorder(rec)
    assert rec.seen == ["Anne", "Peter", "Savannah", "Zara"]


def test_postorder():
    rec = Recorder()
    family().postorder(rec)
    assert rec.seen == ["Savannah", "Peter", "Zara", "Anne"]


def test_breadth_first_visitor_and_iter_agree():
    rec = Recorder()
    tree = family()
    tree.breadth_first(rec)
    assert rec.seen == ["Anne", "Peter", "Zara", "Savannah"]
    assert list(tree) == rec.seen


def test_size_counts_shared_subtrees():
    tree = family()
    assert tree.size() == len(list(tree))
    assert tree.size() == 4


def test_empty_tree():
    tree = Tree()
    rec = Recorder()
    tree.preorder(rec)
    tree.postorder(rec)
    assert rec.seen == []
    assert list(tree) == []
    assert tree.size() == 0


def test_add_to_empty_tree_raises():
    with pytest.raises(ValueError):
        Tree().add_subtree(Tree("x"))


def test_empty_subtree_ignored():
    tree = Tree("root")
    tree.add_subtree(Tree())
    assert list(tree) == ["root"]


def test_short_name_counter():
    counter = ShortNameCounter()
    family().preorder(counter)
    assert counter.count == 3


def test_printer_writes_with_spaces():
    buf = io.StringIO()
    family().preorder(Printer(buf))
    assert buf.getvalue() == "Anne Peter Savannah Zara "


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Preorder: Anne Peter Savannah Zara "
    assert lines[1] == "Short names: 3"
    assert lines[2] == "Postorder: Savannah Peter Zara Anne "
    assert lines[3] == "Breadth first: Anne Peter Zara Savannah "
    assert lines[4] == "Short names: 3"