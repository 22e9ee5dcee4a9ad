"""Binary search tree nodes, lookup results and printing helpers for the word index."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, TextIO


@dataclass(eq=False)
class Node:
    """A tree node holding one word and the documents it occurs in."""

    word: str
    document_ids: list[int] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)
    height: int = 1

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(frozen=True)
class InsertResult:
    """Cost of one insertion: node comparisons and wall time in milliseconds."""

    comparisons: int
    elapsed_ms: float


@dataclass
class SearchResult:
    """Outcome of one lookup."""

    found: bool
    document_ids: list[int] = field(default_factory=list)
    comparisons: int = 0
    elapsed_ms: float = 0.0


def _elapsed_ms(start: float) -> float:
    return (perf_counter() - start) * 1000.0


class BinaryTree:
    """An ordered tree mapping words to the ids of the documents containing them."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def __iter__(self) -> Iterator[Node]:
        return inorder(self.root)

    def search(self, word: str) -> SearchResult:
        """Look up *word*, counting the nodes compared along the way."""
        start = perf_counter()
        comparisons = 0
        current = self.root
        while current is not None:
            comparisons += 1
            if word == current.word:
                return SearchResult(
                    True, list(current.document_ids), comparisons, _elapsed_ms(start)
                )
            current = current.left if word < current.word else current.right
        return SearchResult(False, [], comparisons, _elapsed_ms(start))

    def insert(self, word: str, document_id: int) -> InsertResult:
        """Record that *word* occurs in *document_id*.

        A document id is stored at most once per word.  A new word becomes a
        leaf, after which the tree gets the chance to rebalance itself.
        """
        start = perf_counter()
        comparisons = 0
        parent: Node | None = None
        current = self.root
        while current is not None:
            comparisons += 1
            parent = current
            if word == current.word:
                if document_id not in current.document_ids:
                    current.document_ids.append(document_id)
                return InsertResult(comparisons, _elapsed_ms(start))
            current = current.left if word < current.word else current.right

        node = Node(word, [document_id], parent=parent)
        if parent is None:
            self.root = node
        elif word < parent.word:
            parent.left = node
        else:
            parent.right = node
        self._rebalance(node)
        return InsertResult(comparisons, _elapsed_ms(start))

    def _rebalance(self, node: Node) -> None:
        """Restore balance after *node* was added; a plain tree keeps its shape."""


def inorder(node: Node | None) -> Iterator[Node]:
    """Yield the nodes below *node* in ascending word order."""
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def _walk(node: Node | None) -> Iterator[tuple[Node, int]]:
    stack = [(node, 0)] if node is not None else []
    while stack:
        current, depth = stack.pop()
        yield current, depth
        stack.extend(
            (child, depth + 1)
            for child in (current.right, current.left)
            if child is not None
        )


def print_index(tree: BinaryTree | None, file: TextIO | None = None) -> None:
    """Print every word with its document ids, in word order."""
    out = sys.stdout if file is None else file
    if tree is None or tree.root is None:
        print("Indice vazio.", file=out)
        return
    print("=== INDICE INVERTIDO ===", file=out)
    for node in inorder(tree.root):
        print(f"{node.word}: {', '.join(map(str, node.document_ids))}", file=out)
    print("========================", file=out)


def _children(node: Node) -> list[tuple[Node, bool]]:
    kids = [child for child in (node.left, node.right) if child is not None]
    return [(kid, kid is kids[-1]) for kid in kids]


def print_tree(tree: BinaryTree | None, file: TextIO | None = None) -> None:
    """Draw the shape of the tree with box-drawing branches."""
    out = sys.stdout if file is None else file
    if tree is None or tree.root is None:
        print("Arvore vazia.", file=out)
        return
    print("=== ESTRUTURA DA ARVORE ===", file=out)
    print(tree.root.word, file=out)
    stack = [(child, "", last) for child, last in reversed(_children(tree.root))]
    while stack:
        node, prefix, is_last = stack.pop()
        print(f"{prefix}{'└── ' if is_last else '├── '}{node.word}", file=out)
        child_prefix = prefix + ("    " if is_last else "│   ")
        stack.extend(
            (child, child_prefix, last) for child, last in reversed(_children(node))
        )
    print("===============================", file=out)


def leaf_depths(node: Node | None) -> tuple[int, int] | None:
    """Return the (shallowest, deepest) leaf depth below *node*, or None if empty."""
    depths = [depth for current, depth in _walk(node) if current.is_leaf]
    if not depths:
        return None
    return min(depths), max(depths)