from __future__ import annotations
from typing import Dict, Type

from advisor.config import AdvisorConfig
from advisor.ranking import Recommendation

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver turns the turn's Recommendation into one guess.

    The opening recommendation depends only on the starting candidate set, so
    it is computed once per solver instance and reused across games.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, config: AdvisorConfig | None = None):
        self.config = config or AdvisorConfig()
        self._opening: Recommendation | None = None

    def reset(self) -> None:
        """Per-game hook; the cached opening survives."""

    def recommendation(self, state: dict) -> Recommendation:
        session = state["session"]
        if state["turn"] == 1:
            if self._opening is None:
                self._opening = session.recommend(1)
            return self._opening
        return state.get("recommendation") or session.recommend(state["turn"])

    def choose(self, rec: Recommendation) -> str | None:
        raise NotImplementedError("Override in subclass")

    def next_guess(self, state: dict) -> str:
        rec = self.recommendation(state)
        word = self.choose(rec)
        if word is None:
            raise ValueError("no candidates left to guess from")
        return word
