"""Plain word-list files: one word per line, UTF-8."""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_words(p: Path | str) -> List[str]:
    """
    Read a word list, uppercasing each entry and dropping blank lines.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.strip().upper() for ln in p.read_text(encoding="utf-8").splitlines() if ln.strip()]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line with a trailing newline, creating parent
    directories as needed. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
