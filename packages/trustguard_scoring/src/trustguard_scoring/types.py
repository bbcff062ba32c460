"""Scoring types with strict Pydantic validation."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field

from trustguard_utils import StrictModel


class Platform(StrEnum):
    """Platforms a profile can be analyzed for."""

    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    TINDER = "tinder"


class TrustLevel(StrEnum):
    """Coarse trust band used when presenting a score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ProfileInput(StrictModel):
    """Profile metadata supplied by the caller for one analysis.

    Counts are not range checked: negative values are scored as given.
    Coercing form input is the job of trustguard_service.intake.
    """

    username: str = ""  # reserved, not used in scoring
    bio: str = ""
    followers_count: int = Field(default=0, alias="followersCount")
    following_count: int = Field(default=0, alias="followingCount")
    posts_count: int = Field(default=0, alias="postsCount")
    account_age_in_days: int = Field(default=30, alias="accountAgeInDays")
    is_verified: bool = Field(default=False, alias="isVerified")
    profile_image_url: str | None = Field(default=None, alias="profileImageUrl")
    platform: Platform


class ScoreBreakdown(StrictModel):
    """Sub-scores that feed the trust score, each 0-100."""

    image_score: int = Field(alias="imageScore")
    text_score: int = Field(alias="textScore")
    behavior_score: int = Field(alias="behaviorScore")


class AnalysisResult(StrictModel):
    """Result from analyze_profile."""

    trust_score: int = Field(alias="trustScore")  # 0 - 100
    confidence: int  # 75 - 95
    analysis: ScoreBreakdown
    red_flags: tuple[str, ...] = Field(default=(), alias="redFlags")

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the camelCase keys consumed by the UI layer."""
        payload = self.model_dump(by_alias=True)
        payload["redFlags"] = list(self.red_flags)
        return payload
