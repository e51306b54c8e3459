from .metrics import MetricRecord, compute_metrics, rank_order, entropy_order, find_record
from .picks import Pick, Recommendation, select_top_two, choose_final, recommend
from .display import format_recommendation_table, format_final_pick, format_state

__all__ = [
    "MetricRecord", "compute_metrics", "rank_order", "entropy_order", "find_record",
    "Pick", "Recommendation", "select_top_two", "choose_final", "recommend",
    "format_recommendation_table", "format_final_pick", "format_state",
]
