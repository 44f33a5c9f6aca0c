import io

from treekit.tree import Tree, main


def test_empty_tree_size():
    assert Tree().size() == 0


def test_add_to_empty_tree_is_ignored():
    tree = Tree()
    tree.add_subtree(Tree("a"))
    assert tree.size() == 0


def test_add_empty_subtree_is_ignored():
    tree = Tree("a")
    tree.add_subtree(Tree())
    assert tree.size() == 1


def test_subtrees_are_shared():
    root = Tree("Anne")
    child = Tree("Peter")
    root.add_subtree(child)
    before = root.size()
    child.add_subtree(Tree("Savannah"))
    assert root.size() == before + 1
    assert child.size() == 2


def test_print_is_preorder():
    root = Tree("Anne")
    peter = Tree("Peter")
    root.add_subtree(peter)
    root.add_subtree(Tree("Zara"))
    peter.add_subtree(Tree("Savannah"))
    buf = io.StringIO()
    root.print(buf)
    assert buf.getvalue().splitlines() == ["Anne", "Peter", "Savannah", "Zara"]


def test_print_empty_writes_nothing():
    buf = io.StringIO()
    Tree().print(buf)
    assert buf.getvalue() == ""


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Size: 5\n"