"""Analyze a profile and record the result for a user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from trustguard_scoring import (
    AnalysisResult,
    TrustAggregate,
    TrustLevel,
    analyze_profile,
    classify_trust,
)
from trustguard_service.config import ServiceConfig, get_config
from trustguard_service.storage import record_analysis
from trustguard_utils import get_logger

if TYPE_CHECKING:
    from uuid import UUID

    from trustguard_scoring import ProfileInput

log = get_logger("trustguard_service.analysis")


@dataclass
class RecordedAnalysis:
    """Analysis result together with the user's updated aggregate."""

    result: AnalysisResult
    trust_level: TrustLevel
    aggregate: TrustAggregate


def trust_level_for(result: AnalysisResult, config: ServiceConfig | None = None) -> TrustLevel:
    """Band a result using the configured thresholds."""
    config = config or get_config()
    return classify_trust(
        result.trust_score,
        high_threshold=config.high_trust_threshold,
        medium_threshold=config.medium_trust_threshold,
    )


def analyze_and_record(
    user_id: UUID,
    profile: ProfileInput,
    config: ServiceConfig | None = None,
) -> RecordedAnalysis:
    """Run the scoring engine and fold its score into the user's aggregate.

    Args:
        user_id: User requesting the analysis.
        profile: Profile to analyze.
        config: Service configuration (uses global config if not provided).

    Returns:
        RecordedAnalysis with the result and the new aggregate.

    Raises:
        StorageError: If the user has no profile row.
    """
    result = analyze_profile(profile)
    trust_level = trust_level_for(result, config)

    log.info(
        "profile_analyzed",
        platform=profile.platform,
        trust_score=result.trust_score,
        confidence=result.confidence,
        trust_level=trust_level,
        red_flags=len(result.red_flags),
    )

    aggregate = record_analysis(user_id, result.trust_score)

    return RecordedAnalysis(result=result, trust_level=trust_level, aggregate=aggregate)
