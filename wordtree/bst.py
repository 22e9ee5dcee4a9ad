"""Unbalanced binary search tree for the word index."""

from __future__ import annotations

from wordtree.tree import BinaryTree, InsertResult


class SearchTree(BinaryTree):
    """A plain binary search tree: words stay where insertion puts them."""

    def insert(self, word: str, document_id: int) -> InsertResult:
        """Record *word* in *document_id* without any rebalancing."""
        return super().insert(word, document_id)