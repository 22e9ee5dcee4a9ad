"""Reading whitespace-separated words from numbered text documents."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

log = logging.getLogger(__name__)


@dataclass
class FileData:
    """The words of one document together with its id."""

    file_id: int
    words: list[str] = field(default_factory=list)


def read_words(path: str | os.PathLike[str]) -> list[str]:
    """Return the whitespace-separated words of the file at *path*.

    Raises OSError when the file cannot be read.
    """
    data = Path(path).read_bytes()
    return [chunk.decode("utf-8", "surrogateescape") for chunk in data.split()]


def _read_or_empty(path: Path) -> list[str]:
    try:
        return read_words(path)
    except OSError as exc:
        log.error("Erro ao abrir o arquivo %s: %s", path, exc)
        return []


def read_files(amount: int, directory: str | os.PathLike[str]) -> list[FileData]:
    """Read documents ``0.txt`` through ``<amount>.txt`` from *directory*.

    A document that cannot be read is logged and contributes no words.
    """
    base = Path(directory)
    return [
        FileData(file_id, _read_or_empty(base / f"{file_id}.txt"))
        for file_id in range(amount + 1)
    ]