"""
One advisor game: constraint state + live candidate set, advanced turn by turn.

Per turn:  validate -> apply_feedback -> solved? -> filter -> recommend.

The session is the boundary between the player (or a simulator) and the pure
engine: it rejects malformed input with ValueError and reports an exhausted
candidate set as `TurnResult.exhausted` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from loguru import logger

from advisor.config import AdvisorConfig, WORDLE_MAX_TURNS
from advisor.datasets.dictionary import Dictionary
from advisor.engine import (
    ConstraintState, apply_feedback, filter_candidates, normalize_word,
    validate_feedback, validate_guess,
)
from advisor.ranking import Recommendation, recommend


@dataclass
class TurnResult:
    turn: int
    guess: str
    pattern: str
    state: ConstraintState
    candidates: List[str]
    recommendation: Optional[Recommendation] = None
    solved: bool = False

    @property
    def exhausted(self) -> bool:
        """No word is consistent with the feedback: the inputs contradict each other."""
        return not self.solved and not self.candidates

    @property
    def identified(self) -> Optional[str]:
        """The answer, once exactly one candidate is left."""
        if self.solved:
            return self.state.solved_word
        return self.candidates[0] if len(self.candidates) == 1 else None


class GameSession:
    def __init__(
            self,
            dictionary: Dictionary,
            *,
            excluded: Iterable[str] = (),
            config: AdvisorConfig | None = None,
    ):
        self.dictionary = dictionary
        self.config = config or AdvisorConfig()
        self.state = ConstraintState()

        used = {normalize_word(w) for w in excluded}
        self.candidates: List[str] = [w for w in dictionary if w not in used]
        self.turn = 0
        logger.info(f"{len(self.candidates)} possible answers "
                    f"({len(dictionary) - len(self.candidates)} excluded as used)")

    def recommend(self, turn: int | None = None) -> Recommendation:
        """Recommendation for the current candidate set (read-only)."""
        turn = self.turn + 1 if turn is None else turn
        with logger.contextualize(turn=turn):
            rec = recommend(self.candidates, self.dictionary, self.state, self.config)
            if rec.final is not None:
                logger.debug(
                    f"turn {turn}: N={rec.num_candidates} rank={rec.rank_pick} "
                    f"entropy={rec.entropy_pick} final={rec.final.word}"
                )
        return rec

    def play_turn(self, guess: str, pattern: str, turn: int | None = None) -> TurnResult:
        """
        Record one guess and its feedback, then narrow and re-rank.

        `turn` defaults to the next turn of this session (1..6).
        """
        turn = self.turn + 1 if turn is None else turn
        if not 1 <= turn <= WORDLE_MAX_TURNS:
            raise ValueError(f"turn must be in 1..{WORDLE_MAX_TURNS}; got {turn}")
        if not validate_guess(guess):
            raise ValueError(f"guess must be 5 letters A-Z; got {guess!r}")
        if not validate_feedback(pattern):
            raise ValueError(f"feedback must be 5 of B/G/Y; got {pattern!r}")

        guess = normalize_word(guess)
        pattern = normalize_word(pattern)
        self.turn = turn

        with logger.contextualize(turn=turn):
            return self._advance(turn, guess, pattern)

    def _advance(self, turn: int, guess: str, pattern: str) -> TurnResult:
        apply_feedback(self.state, guess, pattern, turn)

        if self.state.is_solved:
            word = self.state.solved_word
            self.candidates = [word] if word is not None else []
            return TurnResult(turn, guess, pattern, self.state, list(self.candidates), solved=True)

        self.candidates = filter_candidates(self.candidates, self.state)
        result = TurnResult(turn, guess, pattern, self.state, list(self.candidates))
        if not self.candidates:
            logger.warning(f"turn {turn}: no possible words remain after {guess} {pattern}")
            return result

        result.recommendation = self.recommend(turn)
        return result
