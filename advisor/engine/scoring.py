"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - 'G' : green  = correct letter in the correct position
  - 'Y' : yellow = correct letter in the wrong position
  - 'B' : black  = letter not present (or present fewer times than guessed)

This implementation is:
  - duplicate-safe (respects true letter multiplicities in the answer)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from collections import Counter
from typing import Literal

# Type alias for clarity; each pattern character is one of 'G', 'Y', 'B'
PatternChar = Literal["G", "Y", "B"]

GREEN = "G"
YELLOW = "Y"
BLACK = "B"
PATTERN_SYMBOLS = frozenset((GREEN, YELLOW, BLACK))


def score(guess: str, answer: str) -> str:
    """
    Compute Wordle feedback pattern for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Returns:
      - string of the same length composed only of 'G', 'Y', 'B'

    Examples:
      score("ABBEY", "BOBBY") -> "BYGBG"
      score("CRANE", "TRACE") -> "YGGBG"
    """
    # Normalize; the dictionary canonicalizes to uppercase
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    pattern = [BLACK] * n

    # Pass 1: mark greens and collect leftover counts from the answer.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = GREEN
        else:
            remaining[a] += 1

    # Pass 2: mark yellows only if the letter still has remaining availability.
    # This caps 'Y' assignments by the true multiplicity in the answer.
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1  # consume one instance

    return "".join(pattern)


def is_all_green(pattern: str) -> bool:
    return bool(pattern) and all(ch == GREEN for ch in pattern)
