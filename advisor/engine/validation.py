"""
Boundary validation for user input.

The engine assumes clean input; this module answers "is this acceptable?" for
the layer that talks to the player:
  - a guess is exactly 5 letters A-Z (optionally also a member of `allowed`)
  - a feedback pattern is exactly 5 symbols from {B, G, Y}

Both checks are case-insensitive and never raise; callers reprompt on False.
"""

from typing import Iterable, Optional, Set

from advisor.config import WORD_SIZE
from .scoring import PATTERN_SYMBOLS


def normalize_word(word: str) -> str:
    return word.strip().upper()


def validate_guess(word: str, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is a valid guess.

    Notes:
      - `allowed` can be a large collection; a local set is built here for the
        membership check. Precompute once if calling in a tight loop.
    """
    if not isinstance(word, str):
        return False

    w = normalize_word(word)
    if len(w) != WORD_SIZE or not (w.isalpha() and w.isascii()):
        return False

    if allowed is None:
        return True

    # Membership check (case-normalized)
    allowed_set: Set[str] = {normalize_word(a) for a in allowed}
    return w in allowed_set


def validate_feedback(pattern: str) -> bool:
    """Return True if `pattern` is 5 symbols over B/G/Y."""
    if not isinstance(pattern, str):
        return False
    p = normalize_word(pattern)
    return len(p) == WORD_SIZE and all(ch in PATTERN_SYMBOLS for ch in p)
