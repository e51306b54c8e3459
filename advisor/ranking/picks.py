"""
Turning two metric orderings into one recommendation.

select_top_two: from an ordered list, take the first two ADMISSIBLE records
                (not plural, not preterite/3rd-person, not risky); backfill
                from the absolute top when fewer than two qualify.
choose_final:   the rank/entropy trade-off
                  - N > large_set_threshold : entropy pick, unless its entropy
                    is within entropy_rank_threshold bits of the rank pick,
                    then the rank pick (near tie favors the likelier answer)
                  - N <= large_set_threshold: the single highest-ranked word
                  - an axis pick missing    : the single highest-ranked word
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from advisor.config import AdvisorConfig, PickPolicy
from advisor.datasets.dictionary import Dictionary
from advisor.engine.constraints import ConstraintState
from .metrics import MetricRecord, compute_metrics, entropy_order, find_record, rank_order


@dataclass(frozen=True)
class Pick:
    primary: Optional[str] = None
    alternate: Optional[str] = None


def select_top_two(ordered: Sequence[MetricRecord]) -> Pick:
    found: List[str] = []
    for r in ordered:
        if r.admissible:
            found.append(r.word)
            if len(found) == 2:
                return Pick(found[0], found[1])

    if not ordered:
        return Pick()

    # Backfill from the absolute top, keeping the two words distinct.
    primary = found[0] if found else ordered[0].word
    alternate = next((r.word for r in ordered if r.word != primary), None)
    return Pick(primary, alternate)


def choose_final(
        rank_sorted: Sequence[MetricRecord],
        rank_pick: Pick,
        entropy_pick: Pick,
        policy: PickPolicy = PickPolicy(),
) -> Optional[MetricRecord]:
    """Pick the single word to recommend; None only when there are no candidates."""
    if not rank_sorted:
        return None

    n = len(rank_sorted)
    top = rank_sorted[0]
    r_rec = find_record(rank_pick.primary, rank_sorted)
    e_rec = find_record(entropy_pick.primary, rank_sorted)

    if r_rec is None or e_rec is None:
        logger.debug("axis pick unresolved; falling back to top rank")
        return top

    if n <= policy.large_set_threshold:
        logger.debug(f"small set (N={n}): top rank {top.word}")
        return top

    gap = abs(e_rec.entropy - r_rec.entropy)
    logger.debug(f"large set (N={n}): rank={r_rec.word} entropy={e_rec.word} gap={gap:.4f}")
    if gap > policy.entropy_rank_threshold:
        return e_rec
    return r_rec


@dataclass
class Recommendation:
    num_candidates: int
    rank_sorted: List[MetricRecord] = field(default_factory=list)
    entropy_sorted: List[MetricRecord] = field(default_factory=list)
    rank_pick: Pick = field(default_factory=Pick)
    entropy_pick: Pick = field(default_factory=Pick)
    final: Optional[MetricRecord] = None

    def lookup(self, word: Optional[str]) -> Optional[MetricRecord]:
        return find_record(word, self.rank_sorted)


def recommend(
        candidates: Sequence[str],
        dictionary: Dictionary,
        state: ConstraintState,
        config: AdvisorConfig | None = None,
) -> Recommendation:
    """Metrics -> two orderings -> two axis picks -> final pick."""
    config = config or AdvisorConfig()
    policy = config.policy()

    records = compute_metrics(
        candidates, dictionary, state, workers=config.workers, progress=config.progress
    )
    rank_sorted = rank_order(records, policy.epsilon)
    entropy_sorted = entropy_order(records, policy.epsilon)
    rank_pick = select_top_two(rank_sorted)
    entropy_pick = select_top_two(entropy_sorted)
    final = choose_final(rank_sorted, rank_pick, entropy_pick, policy)

    return Recommendation(
        num_candidates=len(candidates),
        rank_sorted=rank_sorted,
        entropy_sorted=entropy_sorted,
        rank_pick=rank_pick,
        entropy_pick=entropy_pick,
        final=final,
    )
