"""
Ranked dictionary of 5-letter words with linguistic tags.

File format: one entry per line, 10 contiguous characters, no delimiter:

    [WORD (5)][RANK (3 digits, 000-100)][NOUN TYPE (1)][VERB TYPE (1)]
    e.g. ABETS070NS

Noun codes: S = singular, P = plural, N = not a noun.
Verb codes: P = base/present, S = third-person singular, T = preterite,
            N = not a verb.

Rank 100 is the most common word, 000 the least.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from loguru import logger

from advisor.config import WORD_SIZE

ENTRY_WIDTH = WORD_SIZE + 5
MAX_RANK = 100


class NounType(str, Enum):
    SINGULAR = "S"
    PLURAL = "P"
    NOT_NOUN = "N"


class VerbType(str, Enum):
    BASE_PRESENT = "P"
    THIRD_PERSON_SINGULAR = "S"
    PRETERITE = "T"
    NOT_VERB = "N"


class DictionaryFormatError(ValueError):
    """A dictionary line does not match the fixed-width entry format."""


@dataclass(frozen=True)
class DictionaryEntry:
    word: str
    rank: int
    noun_type: NounType = NounType.NOT_NOUN
    verb_type: VerbType = VerbType.NOT_VERB


def parse_entry(line: str) -> DictionaryEntry:
    """Parse one fixed-width line; raises DictionaryFormatError on bad input."""
    raw = line.strip()
    if len(raw) < ENTRY_WIDTH:
        raise DictionaryFormatError(f"entry too short ({len(raw)} < {ENTRY_WIDTH}): {raw!r}")

    word = raw[:WORD_SIZE].upper()
    rank_str = raw[WORD_SIZE:WORD_SIZE + 3]
    noun_code = raw[WORD_SIZE + 3].upper()
    verb_code = raw[WORD_SIZE + 4].upper()

    if not (word.isalpha() and word.isascii()):
        raise DictionaryFormatError(f"word must be letters A-Z: {raw!r}")
    if not rank_str.isdigit():
        raise DictionaryFormatError(f"rank must be 3 digits: {raw!r}")
    rank = int(rank_str)
    if rank > MAX_RANK:
        raise DictionaryFormatError(f"rank out of range 0-{MAX_RANK}: {raw!r}")

    try:
        noun_type = NounType(noun_code)
        verb_type = VerbType(verb_code)
    except ValueError as e:
        raise DictionaryFormatError(f"unknown linguistic code in {raw!r}") from e

    return DictionaryEntry(word, rank, noun_type, verb_type)


class Dictionary:
    """
    Immutable word -> entry mapping.

    Lookups of unknown words return a neutral entry (rank 0, not a noun, not
    a verb) rather than failing, so metrics can be computed for any word.
    """

    def __init__(self, entries: Iterable[DictionaryEntry]):
        table: Dict[str, DictionaryEntry] = {}
        for e in entries:
            # first occurrence wins
            table.setdefault(e.word, e)
        self._entries = table
        self._words = sorted(table)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def lookup(self, word: str) -> DictionaryEntry:
        w = word.upper()
        return self._entries.get(w) or DictionaryEntry(w, 0)

    def rank(self, word: str) -> int:
        return self.lookup(word).rank


def load_dictionary(path: Path | str, *, strict: bool = False) -> Dictionary:
    """
    Load a dictionary file.

    Malformed lines are skipped (and counted in a warning) unless `strict`,
    in which case the first one raises DictionaryFormatError with its line number.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    entries: List[DictionaryEntry] = []
    skipped = 0
    with p.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, 1):
            if not raw.strip():
                continue
            try:
                entries.append(parse_entry(raw))
            except DictionaryFormatError as e:
                if strict:
                    raise DictionaryFormatError(f"{p}:{lineno}: {e}") from e
                skipped += 1

    if skipped:
        logger.warning(f"skipped {skipped} malformed line(s) in {p}")
    d = Dictionary(entries)
    logger.info(f"Loaded {len(d)} words from {p}")
    return d
