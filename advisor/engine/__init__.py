from .scoring import score, is_all_green
from .entropy import entropy_score
from .constraints import ConstraintState, apply_feedback, filter_candidates, is_good_fit
from .risk import is_risky
from .validation import validate_guess, validate_feedback, normalize_word

__all__ = [
    "score", "is_all_green", "entropy_score",
    "ConstraintState", "apply_feedback", "filter_candidates", "is_good_fit",
    "is_risky", "validate_guess", "validate_feedback", "normalize_word",
]
