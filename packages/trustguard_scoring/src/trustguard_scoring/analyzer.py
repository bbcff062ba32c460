"""Trust score aggregation.

Port of the profile analyzer used by the web dashboard: combines the
image, text and behavior heuristics into one 0-100 trust score with a
confidence estimate and the red flags that explain it.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from trustguard_scoring.heuristic import (
    compute_behavior_score,
    compute_image_score,
    compute_text_score,
    extract_red_flags,
)
from trustguard_scoring.types import AnalysisResult, ProfileInput, ScoreBreakdown, TrustLevel
IMAGE_WEIGHT = Decimal("0.25")
TEXT_WEIGHT = Decimal("0.35")
BEHAVIOR_WEIGHT = Decimal("0.40")

NEUTRAL_SCORE = 50
MIN_CONFIDENCE = 75
MAX_CONFIDENCE = 95
CONFIDENCE_SPAN = 20

HIGH_TRUST_THRESHOLD = 75
MEDIUM_TRUST_THRESHOLD = 50


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def analyze_profile(profile: ProfileInput) -> AnalysisResult:
    """Compute trust score, confidence and red flags for a profile.

    Pure function of its input: no I/O, no clock, no randomness.

    Args:
        profile: Profile metadata to analyze.

    Returns:
        AnalysisResult with the weighted trust score and its breakdown.
    """
    image_score = compute_image_score(profile.profile_image_url)
    text_score = compute_text_score(profile.bio, profile.platform)
    behavior_score = compute_behavior_score(
        profile.followers_count,
        profile.following_count,
        profile.posts_count,
        profile.account_age_in_days,
        profile.is_verified,
    )

    trust_score = compute_trust_score(image_score, text_score, behavior_score)
    confidence = compute_confidence(trust_score)
    red_flags = extract_red_flags(profile, image_score, text_score, behavior_score)

    return AnalysisResult(
        trust_score=trust_score,
        confidence=confidence,
        analysis=ScoreBreakdown(
            image_score=image_score,
            text_score=text_score,
            behavior_score=behavior_score,
        ),
        red_flags=tuple(red_flags),
    )


def compute_trust_score(image_score: int, text_score: int, behavior_score: int) -> int:
    """Weighted combination of the three sub-scores."""
    total = (
        image_score * IMAGE_WEIGHT
        + text_score * TEXT_WEIGHT
        + behavior_score * BEHAVIOR_WEIGHT
    )
    return round_half_up(total)


def compute_confidence(trust_score: int) -> int:
    """Confidence grows linearly from 75 at score 50 towards 95 at 0 or 100."""
    distance = Decimal(abs(trust_score - NEUTRAL_SCORE)) / NEUTRAL_SCORE
    return min(MAX_CONFIDENCE, round_half_up(MIN_CONFIDENCE + distance * CONFIDENCE_SPAN))


def classify_trust(
    trust_score: int,
    *,
    high_threshold: int = HIGH_TRUST_THRESHOLD,
    medium_threshold: int = MEDIUM_TRUST_THRESHOLD,
) -> TrustLevel:
    """Map a trust score to the band shown to users."""
    if trust_score >= high_threshold:
        return TrustLevel.HIGH
    if trust_score >= medium_threshold:
        return TrustLevel.MEDIUM
    return TrustLevel.LOW
