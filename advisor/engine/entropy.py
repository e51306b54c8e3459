"""
Expected information gain (Shannon entropy) of a guess.

For a guess g, partition the CURRENT candidates by the feedback pattern each
would produce, then
    H(g) = sum_k p_k * log2(N / n_k),   p_k = n_k / N
over the observed patterns only. Buckets are summed in first-seen order so the
same inputs always give bit-identical floats.
"""

from __future__ import annotations

from math import log2
from typing import Dict, Sequence

from .scoring import score as score_fn


def pattern_buckets(guess: str, candidates: Sequence[str]) -> Dict[str, int]:
    """Histogram of feedback patterns, keyed in first-seen order."""
    buckets: Dict[str, int] = {}
    # localize for speed
    _score = score_fn
    for ans in candidates:
        patt = _score(guess, ans)
        buckets[patt] = buckets.get(patt, 0) + 1
    return buckets


def entropy_score(guess: str, candidates: Sequence[str]) -> float:
    """Entropy in bits; 0.0 when there is nothing left to learn."""
    n = len(candidates)
    if n <= 1:
        return 0.0

    H = 0.0
    for c in pattern_buckets(guess, candidates).values():
        p = c / n
        H += p * log2(n / c)
    return H
