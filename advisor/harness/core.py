"""
Experiment harness core primitives.

- run_case:  play one game (one hidden answer) with a given solver, feeding
             simulated feedback through a GameSession.
- run_batch: run many games in sequence (optionally a sample prefix).
- summarize: win rate, mean guesses and guess histogram for a batch.
- Enforces Wordle's 6-turn limit at the harness layer.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Tuple

import numpy as np

from advisor.config import AdvisorConfig, WORDLE_MAX_TURNS
from advisor.datasets.dictionary import Dictionary
from advisor.engine import is_all_green, score
from .session import GameSession


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        dictionary: Dictionary,
        excluded: Iterable[str] = (),
        config: AdvisorConfig | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver wins, the candidates run out, or the
    turn budget is exhausted.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), exhausted (bool),
            history (list[(guess, pattern)]), answer (str), solver_id (str)
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().upper()

    solver.reset()
    session = GameSession(dictionary, excluded=excluded, config=config or solver.config)

    # History accumulates (guess, pattern) tuples for logging and reports
    history: List[Tuple[str, str]] = []
    success = False
    exhausted = False
    last = None

    t0 = time.perf_counter()
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        state = {
            "turn": turn,
            "session": session,
            "recommendation": last.recommendation if last is not None else None,
            "history": list(history),
        }
        guess = solver.next_guess(state)

        patt = score(guess, answer)
        history.append((guess, patt))

        if is_all_green(patt):
            success = True
            break

        last = session.play_turn(guess, patt, turn)
        if last.exhausted:
            exhausted = True
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "solver_id": solver.id,
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "exhausted": exhausted,
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        dictionary: Dictionary,
        excluded: Iterable[str] = (),
        config: AdvisorConfig | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.
    """
    _assert_wordle_turns(max_turns)

    excluded = list(excluded)
    pool = list(answers) if sample is None else list(answers)[:sample]
    return [
        run_case(solver, ans, dictionary=dictionary, excluded=excluded, config=config)
        for ans in pool
    ]


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: win rate, mean/median guesses over wins, and a
    histogram of guesses-to-win (index i = solved in i guesses; 0 unused).
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": None,
                "median_guesses": None, "histogram": [0] * (WORDLE_MAX_TURNS + 1)}

    wins = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    hist = np.bincount(wins, minlength=WORDLE_MAX_TURNS + 1) if wins.size else np.zeros(WORDLE_MAX_TURNS + 1, dtype=int)
    return {
        "games": len(results),
        "wins": int(wins.size),
        "win_rate": float(wins.size / len(results)),
        "mean_guesses": float(wins.mean()) if wins.size else None,
        "median_guesses": float(np.median(wins)) if wins.size else None,
        "histogram": hist.tolist(),
    }
