"""Profile trust scoring.

Estimates how trustworthy a social-media or dating profile looks from its
metadata. The engine is a pure function: it performs no I/O and keeps no
state, so it can be called concurrently without synchronization.

- heuristic: image, text and behavior sub-scores plus red flags
- analyzer: weighted aggregation and confidence
- stats: running-average rule for per-user aggregates
"""

from trustguard_scoring.analyzer import (
    analyze_profile,
    classify_trust,
    compute_confidence,
    compute_trust_score,
)
from trustguard_scoring.heuristic import (
    compute_behavior_score,
    compute_image_score,
    compute_text_score,
    extract_red_flags,
)
from trustguard_scoring.stats import TrustAggregate, running_average
from trustguard_scoring.types import (
    AnalysisResult,
    Platform,
    ProfileInput,
    ScoreBreakdown,
    TrustLevel,
)

__all__ = [
    "AnalysisResult",
    "Platform",
    "ProfileInput",
    "ScoreBreakdown",
    "TrustAggregate",
    "TrustLevel",
    "analyze_profile",
    "classify_trust",
    "compute_behavior_score",
    "compute_confidence",
    "compute_image_score",
    "compute_text_score",
    "compute_trust_score",
    "extract_red_flags",
    "running_average",
]
