"""Command-line front ends that index numbered documents and query the index."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Sequence, TextIO

from wordtree.avl import AVLTree
from wordtree.bst import SearchTree
from wordtree.data import FileData, read_files
from wordtree.tree import BinaryTree, leaf_depths

_INT_MAX = 2**31 - 1


def build_index(
    tree: BinaryTree, directory: str | os.PathLike[str], n_docs: int
) -> list[FileData]:
    """Insert every word of documents 0..*n_docs* into *tree*; return the documents."""
    files = read_files(n_docs, directory)
    for document in files:
        for word in document.words:
            tree.insert(word, document.file_id)
    return files


def _stats_header(tree: BinaryTree) -> str:
    if isinstance(tree, AVLTree):
        return " ==== Estatisticas de busca ====:"
    return "Estatisticas de busca:"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ratio(total: float, count: int) -> float:
    return total / count if count else float("nan")


def _search(tree: BinaryTree, stdin: TextIO, stdout: TextIO) -> None:
    print("Digite palavras para buscar (Ctrl+D para sair):", file=stdout)
    for word in _tokens(stdin):
        result = tree.search(word)
        if result.found:
            ids = "".join(f"{doc} " for doc in result.document_ids)
            print(
                f'Palavra "{word}" encontrada nos documentos: {ids}'
                f"(Comparacoes: {result.comparisons}, Tempo: {result.elapsed_ms:g} ms)",
                file=stdout,
            )
        else:
            print(
                f'Palavra "{word}" nao encontrada ({result.comparisons} comparacoes)',
                file=stdout,
            )


def _stats(tree: BinaryTree, files: list[FileData], stdout: TextIO) -> None:
    total_words = 0
    total_comparisons = 0
    total_time = 0.0
    for document in files:
        for word in document.words:
            total_words += 1
            result = tree.search(word)
            total_comparisons += result.comparisons
            total_time += result.elapsed_ms

    depths = leaf_depths(tree.root)
    min_depth, max_depth = depths if depths is not None else (_INT_MAX, 0)

    print(_stats_header(tree), file=stdout)
    print(f"Total de palavras buscadas: {total_words}", file=stdout)
    print(f"Comparacoes totais: {total_comparisons}", file=stdout)
    print(
        f"Comparacoes medias por busca: {_ratio(total_comparisons, total_words):g}",
        file=stdout,
    )
    print(f"Tempo total de busca: {total_time:g} ms", file=stdout)
    print(f"Tempo medio por busca: {_ratio(total_time, total_words):g} ms", file=stdout)
    print(
        f"Altura do maior galho: {max_depth}// Altura do menor galho: {min_depth}",
        file=stdout,
    )
    print(
        f"Diferença de altura entre o maior e menor galhos: {max_depth - min_depth}",
        file=stdout,
    )


def run(
    tree: BinaryTree,
    argv: Sequence[str],
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """Index the documents named by *argv* into *tree* and run the command.

    *argv* is ``[command, n_docs, directory]``; returns the exit status.
    """
    if len(argv) != 3:
        program = "avl" if isinstance(tree, AVLTree) else "bst"
        print(f"Uso: ./{program} <search|stats> <n_docs> <diretorio>", file=stderr)
        return 1

    command, n_docs_text, directory = argv
    try:
        n_docs = int(n_docs_text)
    except ValueError:
        print(f"Numero de documentos invalido: {n_docs_text}", file=stderr)
        return 1

    files = build_index(tree, directory, n_docs)

    if command == "search":
        _search(tree, stdin, stdout)
    elif command == "stats":
        _stats(tree, files, stdout)
    else:
        print("Comando invalido: use 'search' ou 'stats'", file=stderr)
    return 0


def main_bst(argv: Sequence[str] | None = None) -> int:
    """Entry point using an unbalanced binary search tree."""
    args = sys.argv[1:] if argv is None else list(argv)
    return run(SearchTree(), args, sys.stdin, sys.stdout, sys.stderr)


def main_avl(argv: Sequence[str] | None = None) -> int:
    """Entry point using an AVL tree."""
    args = sys.argv[1:] if argv is None else list(argv)
    return run(AVLTree(), args, sys.stdin, sys.stdout, sys.stderr)