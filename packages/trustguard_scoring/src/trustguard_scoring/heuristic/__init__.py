"""Profile trust heuristics.

Three independent 0-100 sub-scores (image, text, behavior) plus the
red-flag checks that explain them.
"""

from trustguard_scoring.heuristic.flags import extract_red_flags
from trustguard_scoring.heuristic.scorer import (
    compute_behavior_score,
    compute_image_score,
    compute_text_score,
)

__all__ = [
    "compute_behavior_score",
    "compute_image_score",
    "compute_text_score",
    "extract_red_flags",
]
