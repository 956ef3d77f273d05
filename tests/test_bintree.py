from drills.bintree import BinaryTree


def test_len():
    tree = BinaryTree()
    assert len(tree) == 0
    tree.insert(2)
    assert len(tree) == 1
    tree.insert(1)
    assert len(tree) == 2
    tree.insert(2)  # not a unique item
    assert len(tree) == 2


def _check_has(tree, expected):
    got = [tree.has(i) for i in range(len(expected))]
    assert got == expected


def test_has():
    tree = BinaryTree()
    _check_has(tree, [False, False, False, False, False])
    tree.insert(0)
    _check_has(tree, [True, False, False, False, False])
    tree.insert(4)
    _check_has(tree, [True, False, False, False, True])
    tree.insert(4)
    _check_has(tree, [True, False, False, False, True])
    tree.insert(3)
    _check_has(tree, [True, False, False, True, True])


def test_unbalanced():
    tree = BinaryTree()
    for i in range(100):
        tree.insert(i)
    assert len(tree) == 100
    assert tree.has(50)


def test_contains_with_strings():
    tree = BinaryTree()
    tree.insert("foo")
    assert len(tree) == 1
    tree.insert("bar")
    assert "foo" in tree
    assert "bar" in tree
    assert "baz" not in tree