"""
Policies built on the advisor's Recommendation.

  advisor      : the final pick (rank/entropy trade-off by candidate-set size)
  rank_axis    : top admissible word by rank (most likely answer first)
  entropy_axis : top admissible word by entropy (most informative first)

The two axis solvers exist to measure the trade-off against its components.
"""

from __future__ import annotations

from advisor.ranking import Recommendation
from .base import BaseSolver, register


@register
class AdvisorSolver(BaseSolver):
    id = "advisor"
    name = "Rank/Entropy Advisor"
    version = "1.0.0"

    def choose(self, rec: Recommendation) -> str | None:
        return rec.final.word if rec.final is not None else None


@register
class RankAxisSolver(BaseSolver):
    id = "rank_axis"
    name = "Rank (admissible)"
    version = "1.0.0"

    def choose(self, rec: Recommendation) -> str | None:
        return rec.rank_pick.primary


@register
class EntropyAxisSolver(BaseSolver):
    id = "entropy_axis"
    name = "Entropy (admissible)"
    version = "1.0.0"

    def choose(self, rec: Recommendation) -> str | None:
        return rec.entropy_pick.primary
