import io

import pytest

from wordtree.tree import (
    BinaryTree,
    InsertResult,
    SearchResult,
    inorder,
    leaf_depths,
    print_index,
    print_tree,
)


def _build(words):
    tree = BinaryTree()
    for doc_id, word in enumerate(words, start=1):
        tree.insert(word, doc_id)
    return tree


def test_new_tree_is_empty():
    tree = BinaryTree()
    assert tree.root is None
    assert list(tree) == []


def test_search_empty_tree():
    result = BinaryTree().search("nada")
    assert result.found is False
    assert result.comparisons == 0
    assert result.document_ids == []


def test_first_insert_becomes_root():
    tree = BinaryTree()
    result = tree.insert("raiz", 5)
    assert isinstance(result, InsertResult)
    assert result.comparisons == 0
    assert result.elapsed_ms >= 0.0
    assert tree.root.word == "raiz"
    assert tree.root.document_ids == [5]


def test_duplicate_document_is_stored_once():
    tree = BinaryTree()
    tree.insert("x", 1)
    tree.insert("x", 2)
    tree.insert("x", 2)
    assert tree.root.document_ids == [1, 2]


def test_children_link_to_parent():
    tree = _build(["m", "c", "t"])
    assert tree.root.left.parent is tree.root
    assert tree.root.right.parent is tree.root
    assert tree.root.parent is None


def test_search_root_takes_one_comparison():
    tree = _build(["m", "c", "t"])
    result = tree.search("m")
    assert isinstance(result, SearchResult)
    assert result.found is True
    assert result.comparisons == 1
    assert result.document_ids == [1]


def test_search_result_is_a_copy():
    tree = _build(["m"])
    result = tree.search("m")
    result.document_ids.append(99)
    assert tree.search("m").document_ids == [1]


@pytest.mark.parametrize(
    "words",
    [["d", "b", "f", "a", "c", "e", "g"], list("zyxwvu"), ["k", "k", "a", "z", "a"]],
)
def test_inorder_is_sorted(words):
    tree = _build(words)
    assert [node.word for node in inorder(tree.root)] == sorted(set(words))
    assert [node.word for node in tree] == sorted(set(words))


def test_inorder_of_none_is_empty():
    assert list(inorder(None)) == []


def test_every_inserted_word_is_found():
    words = ["pera", "uva", "maca", "kiwi", "lima"]
    tree = _build(words)
    for doc_id, word in enumerate(words, start=1):
        result = tree.search(word)
        assert result.found
        assert result.document_ids == [doc_id]


def test_print_index_empty():
    out = io.StringIO()
    print_index(BinaryTree(), out)
    assert out.getvalue() == "Indice vazio.\n"


def test_print_index_none():
    out = io.StringIO()
    print_index(None, out)
    assert out.getvalue() == "Indice vazio.\n"


def test_print_index_lists_words_in_order():
    tree = BinaryTree()
    tree.insert("b", 1)
    tree.insert("a", 2)
    tree.insert("b", 3)
    out = io.StringIO()
    print_index(tree, out)
    assert out.getvalue() == (
        "=== INDICE INVERTIDO ===\n"
        "a: 2\n"
        "b: 1, 3\n"
        "========================\n"
    )


def test_print_tree_empty():
    out = io.StringIO()
    print_tree(BinaryTree(), out)
    assert out.getvalue() == "Arvore vazia.\n"


def test_print_tree_structure():
    tree = _build(["b", "a", "c", "d"])
    out = io.StringIO()
    print_tree(tree, out)
    assert out.getvalue() == (
        "=== ESTRUTURA DA ARVORE ===\n"
        "b\n"
        "├── a\n"
        "└── c\n"
        "    └── d\n"
        "===============================\n"
    )


def test_print_tree_mentions_every_word_once():
    words = ["m", "f", "t", "a", "h", "p", "z"]
    out = io.StringIO()
    print_tree(_build(words), out)
    lines = out.getvalue().splitlines()[1:-1]
    assert sorted(line.split(" ")[-1] for line in lines) == sorted(words)


def test_leaf_depths_empty():
    assert leaf_depths(None) is None


def test_leaf_depths_single_node():
    assert leaf_depths(_build(["solo"]).root) == (0, 0)


def test_leaf_depths_of_chain():
    words = ["a", "b", "c", "d", "e"]
    tree = _build(words)
    deepest = len(words) - 1
    assert leaf_depths(tree.root) == (deepest, deepest)


def test_leaf_depths_ordered():
    tree = _build(["m", "f", "t", "a", "z", "y"])
    shallow, deep = leaf_depths(tree.root)
    assert shallow <= deep