"""
Repeat-letter risk.

A guess like 'DADDY' bets on three D's. Unless the board has already proven
that many, such a guess is flagged as risky. This is a ranking signal only;
risky words are never filtered out of the candidate set.
"""

from collections import Counter
from typing import Mapping


def is_risky(word: str, required_counts: Mapping[str, int]) -> bool:
    """True if some repeated letter in `word` exceeds its confirmed minimum count."""
    for ch, n in Counter(word).items():
        if n > 1 and n > required_counts.get(ch, 0):
            return True
    return False
