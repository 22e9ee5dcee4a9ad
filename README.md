# wordtree

`wordtree` builds an inverted index from a numbered set of text documents.
For each word it records the ids of the documents that contain it. The index
can live in a plain binary search tree or in a self-balancing AVL tree, so
the two can be compared on the same data.

Every insert and every search also reports how many nodes it compared and
how long it took, in milliseconds.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Two commands are installed. They take the same arguments and differ only in
the tree that holds the index:

```
wordtree-bst <search|stats> <n_docs> <directory>
wordtree-avl <search|stats> <n_docs> <directory>
```

The documents are read from `<directory>/0.txt` through
`<directory>/<n_docs>.txt`, both ends included. Words are split on
whitespace and compared exactly, with no case folding or punctuation
stripping. A document id is stored only once per word, however often the
word appears in that document. A document that cannot be read is logged as
an error and adds no words.

- `search` reads words from standard input until end of input. For each one
  it prints the ids of the documents that contain it, the number of
  comparisons and the time taken. A missing word is reported with the number
  of comparisons made while looking for it.
- `stats` searches the tree once for every word read from the documents and
  prints the total and average number of comparisons, the total and average
  search time, the depths of the deepest and shallowest leaves, and the
  difference between them.

Messages are printed in Portuguese. With the wrong number of arguments, or
an `n_docs` that is not an integer, the command prints a usage or error
message and exits with status 1. An unknown command prints an error message
after the documents have been indexed.

Example:

```
wordtree-avl stats 10 ./data
echo "azul verde" | wordtree-bst search 10 ./data
```

## Library use

```python
import sys

from wordtree.avl import AVLTree
from wordtree.bst import SearchTree
from wordtree.tree import leaf_depths, print_index, print_tree

tree = AVLTree()
for doc_id, word in enumerate(["azul", "roxo", "rosa", "verde"], start=1):
    tree.insert(word, doc_id)

result = tree.search("verde")
print(result.found, result.document_ids, result.comparisons)

print_tree(tree, sys.stdout)     # the shape of the tree
print_index(tree, sys.stdout)    # each word with its document ids, in order
print(leaf_depths(tree.root))    # (shallowest, deepest) leaf depth
```

- `wordtree.tree.BinaryTree` is the common base. `insert(word, document_id)`
  returns an `InsertResult` with `comparisons` and `elapsed_ms`.
  `search(word)` returns a `SearchResult` with `found`, `document_ids`,
  `comparisons` and `elapsed_ms`. Iterating over a tree yields its `Node`s in
  word order.
- `wordtree.bst.SearchTree` never rebalances. Words inserted in sorted order
  give a degenerate, list-shaped tree.
- `wordtree.avl.AVLTree` rotates after each new word, so the tree stays
  shallow whatever the insertion order.
- `wordtree.tree.inorder(node)` yields the nodes below `node` in word order.
- `wordtree.tree.leaf_depths(node)` returns `(shallowest, deepest)` leaf
  depths, or `None` for an empty tree.
- `print_index` and `print_tree` write to standard output when no file is
  given.
- `wordtree.data.read_words(path)` returns the words of one file and raises
  `OSError` if the file cannot be read. `read_files(amount, directory)`
  returns `FileData` records (`file_id`, `words`) for `0.txt` through
  `<amount>.txt`.
- `wordtree.cli.build_index(tree, directory, n_docs)` fills any tree from a
  directory of documents and returns the `FileData` records it read.

## Limitations

The index is kept only in memory. Each command run reads the documents and
rebuilds the tree from scratch, and nothing is saved between runs. Words
cannot be removed from a tree.