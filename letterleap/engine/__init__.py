from .scoring import FeedbackStatus, compute_feedback, pattern_of, score
from .transform import (common_letter_count, is_single_substitution,
                        is_valid_transformation, letter_multiset)
from .validation import RejectReason, normalize, validate_guess

__all__ = [
    "FeedbackStatus", "compute_feedback", "pattern_of", "score",
    "common_letter_count", "is_single_substitution", "is_valid_transformation",
    "letter_multiset",
    "RejectReason", "normalize", "validate_guess",
]
