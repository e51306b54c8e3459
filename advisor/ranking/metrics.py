"""
Per-candidate metrics and the two metric orderings.

Each remaining candidate gets a MetricRecord:
  - entropy  : expected information gain (bits) against the CURRENT candidates
  - rank     : static frequency score from the dictionary (100 = most common)
  - noun/verb: linguistic tags from the dictionary
  - is_risky : bets on a repeated letter the board hasn't confirmed

Records are recomputed from scratch every turn. The entropy pass is O(N^2)
score() calls and dominates a turn; with workers > 1 it is spread across a
process pool (one task per guess, results kept in input order, so the output
is identical to the sequential pass).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple

from loguru import logger
from tqdm import tqdm

from advisor.datasets.dictionary import Dictionary, NounType, VerbType
from advisor.engine.constraints import ConstraintState
from advisor.engine.entropy import entropy_score
from advisor.engine.risk import is_risky

EPSILON = 1e-9

# Below this many candidates a pool costs more than it saves.
PARALLEL_MIN_CANDIDATES = 200


@dataclass(frozen=True)
class MetricRecord:
    word: str
    entropy: float
    rank: int
    noun_type: NounType
    verb_type: VerbType
    is_risky: bool

    @property
    def admissible(self) -> bool:
        """Not a plural noun, not a preterite/3rd-person verb form, not risky."""
        return (
            self.noun_type is not NounType.PLURAL
            and self.verb_type not in (VerbType.PRETERITE, VerbType.THIRD_PERSON_SINGULAR)
            and not self.is_risky
        )


# ---- worker-side state for the parallel entropy pass ----
_WORKER_CANDIDATES: Tuple[str, ...] = ()


def _init_worker(candidates: Tuple[str, ...]) -> None:
    global _WORKER_CANDIDATES
    _WORKER_CANDIDATES = candidates


def _entropy_worker(guess: str) -> float:
    return entropy_score(guess, _WORKER_CANDIDATES)


def _entropies(candidates: Sequence[str], *, workers: int, progress: bool) -> List[float]:
    n = len(candidates)
    if workers > 1 and n >= PARALLEL_MIN_CANDIDATES:
        logger.debug(f"entropy pass over {n} candidates with {workers} workers")
        chunksize = max(1, n // (workers * 8))
        with Pool(processes=workers, initializer=_init_worker, initargs=(tuple(candidates),)) as pool:
            results = pool.imap(_entropy_worker, candidates, chunksize=chunksize)
            if progress:
                results = tqdm(results, total=n, desc="Entropy", unit="word", ncols=80)
            return list(results)

    words = tqdm(candidates, desc="Entropy", unit="word", ncols=80) if progress else candidates
    return [entropy_score(g, candidates) for g in words]


def compute_metrics(
        candidates: Sequence[str],
        dictionary: Dictionary,
        state: ConstraintState,
        *,
        workers: int = 1,
        progress: bool = False,
) -> List[MetricRecord]:
    """One MetricRecord per candidate, in candidate order."""
    entropies = _entropies(candidates, workers=workers, progress=progress)

    out: List[MetricRecord] = []
    for word, H in zip(candidates, entropies):
        entry = dictionary.lookup(word)
        out.append(MetricRecord(
            word=word,
            entropy=H,
            rank=entry.rank,
            noun_type=entry.noun_type,
            verb_type=entry.verb_type,
            is_risky=is_risky(word, state.required_counts),
        ))
    return out


def _float_greater(a: float, b: float, epsilon: float) -> bool:
    return a > b + epsilon


def rank_order(records: Sequence[MetricRecord], epsilon: float = EPSILON) -> List[MetricRecord]:
    """Descending rank; ties broken by descending entropy."""
    def cmp(a: MetricRecord, b: MetricRecord) -> int:
        if a.rank != b.rank:
            return b.rank - a.rank
        if _float_greater(a.entropy, b.entropy, epsilon):
            return -1
        if _float_greater(b.entropy, a.entropy, epsilon):
            return 1
        return 0

    return sorted(records, key=cmp_to_key(cmp))


def entropy_order(records: Sequence[MetricRecord], epsilon: float = EPSILON) -> List[MetricRecord]:
    """Descending entropy (equal within epsilon); ties broken by descending rank."""
    def cmp(a: MetricRecord, b: MetricRecord) -> int:
        if _float_greater(a.entropy, b.entropy, epsilon):
            return -1
        if _float_greater(b.entropy, a.entropy, epsilon):
            return 1
        return b.rank - a.rank

    return sorted(records, key=cmp_to_key(cmp))


def find_record(word: Optional[str], records: Sequence[MetricRecord]) -> Optional[MetricRecord]:
    if word is None:
        return None
    for r in records:
        if r.word == word:
            return r
    return None
