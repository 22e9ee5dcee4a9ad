"""Inverted word index over numbered documents, held in a binary search tree or an AVL tree."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "cli", "data", "tree"]