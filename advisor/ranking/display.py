"""
Console formatting for a turn's recommendation.

Pure string builders (the CLI prints them):
  - format_recommendation_table: side-by-side top-K by rank and by entropy,
                                 followed by each axis' top pick and alternate
  - format_final_pick:           centered "Final Top Pick" banner
  - format_state:                green mask / required / excluded letters
"""

from __future__ import annotations

from typing import List, Optional

from advisor.engine.constraints import ConstraintState
from .metrics import MetricRecord
from .picks import Recommendation

COL_WIDTH = 43
TOTAL_WIDTH = 89
RULE = "-" * COL_WIDTH + "+" + "-" * COL_WIDTH
BANNER_RULE = "-" * (TOTAL_WIDTH - 2)


def _yn(flag: bool) -> str:
    return "Y" if flag else "N"


def format_row(i: int, r: MetricRecord) -> str:
    """e.g. '  1. SLATE (R=080, H=1.5850) N=S V=N R=N'"""
    return (
        f"{i:3d}. {r.word:<5} (R={r.rank:03d}, H={r.entropy:.4f}) "
        f"N={r.noun_type.value} V={r.verb_type.value} R={_yn(r.is_risky)}"
    )


def _pick_line(label: str, word: Optional[str], rec: Optional[MetricRecord]) -> str:
    rank = rec.rank if rec else 0
    H = rec.entropy if rec else 0.0
    return f"     {label:<10}: {word or 'NONE':<5} (R={rank:03d}, H={H:.4f})"


def format_recommendation_table(rec: Recommendation, top: int = 40) -> str:
    rows = min(top, rec.num_candidates)
    lines: List[str] = [
        "",
        f"{'':22}--- Top {top} Choices (Possible Answers: {rec.num_candidates}) ---",
        f"{'':16}(R=Rank, H=Entropy, N=Plurality, V=Preterite, R=Repeat Risk)",
        RULE,
        f"{'     Rank-Optimized':<{COL_WIDTH}}|{'     Entropy-Optimized':<{COL_WIDTH}}",
        f"{'   (Higher Rank = More Common)':<{COL_WIDTH}}|{'   (Higher H = Reduces solution set)':<{COL_WIDTH}}",
        RULE,
    ]
    for i in range(rows):
        left = format_row(i + 1, rec.rank_sorted[i])
        right = format_row(i + 1, rec.entropy_sorted[i])
        lines.append(f"{left:<{COL_WIDTH}}|{right:<{COL_WIDTH}}")
    lines.append(RULE)

    rp, ep = rec.rank_pick, rec.entropy_pick
    for label, rw, ew in (("Top Pick", rp.primary, ep.primary),
                          ("Alternate", rp.alternate, ep.alternate)):
        left = _pick_line(label, rw, rec.lookup(rw))
        right = _pick_line(label, ew, rec.lookup(ew))
        lines.append(f"{left:<{COL_WIDTH}}|{right:<{COL_WIDTH}}")
    lines.append(RULE)
    return "\n".join(lines)


def format_final_pick(rec: Recommendation) -> str:
    f = rec.final
    if f is None:
        text = "Final Top Pick: NONE"
    else:
        text = f"Final Top Pick: {f.word} (R={f.rank:03d}, H={f.entropy:.4f})"
    return f"{text:^{TOTAL_WIDTH}}".rstrip() + "\n" + BANNER_RULE


def format_state(state: ConstraintState) -> str:
    return "\n".join([
        "--- Current Game State ---",
        f"Mask (Green) : {state.mask_string()}",
        f"Required Letters: {state.required_string() or '-'} (Min Count Constraint)",
        f"Excluded Letters: {state.excluded_string() or '-'}",
    ])
