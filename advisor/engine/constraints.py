"""
Accumulated game constraints and candidate filtering.

Unlike a history replay (re-scoring every candidate against every past guess),
the advisor keeps one `ConstraintState` per game and folds each turn's
feedback into it:
  - green_mask            : letters fixed at exact positions
  - required_counts       : minimum occurrences per letter (yellow + green)
  - excluded_letters      : letters known to be wholly absent
  - positional_exclusions : per turn, per position, a letter that cannot sit there

All four only ever tighten. Filtering then keeps the words that satisfy
every recorded constraint.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from loguru import logger

from advisor.config import WORD_SIZE, WORDLE_MAX_TURNS
from .scoring import BLACK, GREEN, YELLOW


def _empty_mask() -> List[Optional[str]]:
    return [None] * WORD_SIZE


def _empty_positional() -> List[List[Optional[str]]]:
    return [[None] * WORD_SIZE for _ in range(WORDLE_MAX_TURNS)]


@dataclass
class ConstraintState:
    green_mask: List[Optional[str]] = field(default_factory=_empty_mask)
    required_counts: Dict[str, int] = field(default_factory=dict)
    excluded_letters: Set[str] = field(default_factory=set)
    positional_exclusions: List[List[Optional[str]]] = field(default_factory=_empty_positional)

    @property
    def is_solved(self) -> bool:
        """Every slot of the green mask is fixed."""
        return all(ch is not None for ch in self.green_mask)

    @property
    def solved_word(self) -> Optional[str]:
        return "".join(self.green_mask) if self.is_solved else None  # type: ignore[arg-type]

    def required(self, letter: str) -> int:
        return self.required_counts.get(letter, 0)

    def mask_string(self) -> str:
        """Green mask with '*' for unconstrained slots, e.g. '*RA*E'."""
        return "".join(ch or "*" for ch in self.green_mask)

    def required_string(self) -> str:
        """Required letters repeated by their minimum count, alphabetical."""
        return "".join(ch * n for ch, n in sorted(self.required_counts.items()) if n > 0)

    def excluded_string(self) -> str:
        return "".join(sorted(self.excluded_letters))

    def copy(self) -> "ConstraintState":
        return ConstraintState(
            green_mask=list(self.green_mask),
            required_counts=dict(self.required_counts),
            excluded_letters=set(self.excluded_letters),
            positional_exclusions=[list(row) for row in self.positional_exclusions],
        )


def apply_feedback(state: ConstraintState, guess: str, pattern: str, turn: int) -> ConstraintState:
    """
    Fold one (guess, pattern) observation into `state` (in place) and return it.

    Args:
      state   : the game's constraint state
      guess   : 5-letter guess (already validated)
      pattern : 5-char feedback over 'G', 'Y', 'B' (already validated)
      turn    : 1-based turn index; selects the positional-exclusion row
    """
    if not 1 <= turn <= WORDLE_MAX_TURNS:
        raise ValueError(f"turn must be in 1..{WORDLE_MAX_TURNS}; got {turn}")

    guess = guess.strip().upper()
    pattern = pattern.strip().upper()

    # Minimum count of each letter proven by THIS guess (greens + yellows).
    confirmed = Counter(g for g, p in zip(guess, pattern) if p in (GREEN, YELLOW))

    row = state.positional_exclusions[turn - 1]
    for pos, (ch, p) in enumerate(zip(guess, pattern)):
        if p == GREEN:
            state.green_mask[pos] = ch
        else:
            # Yellow and black both rule the letter out of this slot.
            row[pos] = ch

        if p in (GREEN, YELLOW):
            if state.required(ch) < confirmed[ch]:
                state.required_counts[ch] = confirmed[ch]
        elif p == BLACK:
            # A black duplicate of a letter that is green/yellow elsewhere only
            # caps the count; the letter itself stays required.
            if state.required(ch) == 0 and confirmed[ch] == 0:
                state.excluded_letters.add(ch)

    logger.debug(
        f"turn {turn}: {guess} {pattern} -> mask={state.mask_string()} "
        f"required={state.required_string() or '-'} excluded={state.excluded_string() or '-'}"
    )
    return state


def is_good_fit(word: str, state: ConstraintState) -> bool:
    """True if `word` satisfies every constraint recorded in `state`."""
    counts = Counter(word)

    # Required letters: at least the minimum count.
    for ch, need in state.required_counts.items():
        if need > 0 and counts[ch] < need:
            return False

    for pos, ch in enumerate(word):
        if ch in state.excluded_letters:
            return False

        fixed = state.green_mask[pos]
        if fixed is not None and fixed != ch:
            return False

        # Letter already ruled out of this slot on some earlier turn.
        for row in state.positional_exclusions:
            if row[pos] == ch:
                return False

    return True


def filter_candidates(candidates: Iterable[str], state: ConstraintState) -> List[str]:
    """
    Keep only candidates consistent with `state` (order preserved).
    Idempotent: filtering an already-filtered list returns it unchanged.
    """
    out = [w for w in candidates if is_good_fit(w, state)]
    logger.debug(f"filtered: {len(out)} candidates remain")
    return out
