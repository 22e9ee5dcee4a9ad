"""Self-balancing (AVL) binary search tree for the word index."""

from __future__ import annotations

from wordtree.tree import BinaryTree, InsertResult, Node


def _height(node: Node | None) -> int:
    return 0 if node is None else node.height


def _update_height(node: Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _replace_in_parent(old: Node, new: Node) -> None:
    parent = old.parent
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def _rotate_left(node: Node) -> Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = node
    _replace_in_parent(node, pivot)
    pivot.left = node
    node.parent = pivot
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_right(node: Node) -> Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = node
    _replace_in_parent(node, pivot)
    pivot.right = node
    node.parent = pivot
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left_right(node: Node) -> Node:
    assert node.left is not None
    node.left = _rotate_left(node.left)
    node.left.parent = node
    return _rotate_right(node)


def _rotate_right_left(node: Node) -> Node:
    assert node.right is not None
    node.right = _rotate_right(node.right)
    node.right.parent = node
    return _rotate_left(node)


class AVLTree(BinaryTree):
    """A binary search tree that rotates after each new word to stay balanced."""

    def insert(self, word: str, document_id: int) -> InsertResult:
        """Record *word* in *document_id*, rebalancing when a new node is added."""
        return super().insert(word, document_id)

    def _rebalance(self, node: Node) -> None:
        current: Node | None = node
        while current is not None:
            _update_height(current)
            balance = _balance(current)
            if balance > 1:
                if _balance(current.left) >= 0:
                    current = _rotate_right(current)
                else:
                    current = _rotate_left_right(current)
            elif balance < -1:
                if _balance(current.right) <= 0:
                    current = _rotate_left(current)
                else:
                    current = _rotate_right_left(current)

            if current.parent is None:
                self.root = current
                return
            current = current.parent