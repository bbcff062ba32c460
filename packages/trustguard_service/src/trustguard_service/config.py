"""Service configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from trustguard_db import InterestArea
from trustguard_scoring import Platform


class ServiceConfig(BaseModel):
    """Defaults applied by the collaborators, never by the scoring engine."""

    # Intake defaults
    default_account_age_days: int = Field(
        default=30,
        description="Account age used when the form leaves it blank",
    )
    default_platform: Platform = Field(
        default=Platform.INSTAGRAM,
        description="Platform used when the form leaves it blank",
    )

    # Trust bands shown to users
    high_trust_threshold: int = Field(default=75, description="Min score for the high band")
    medium_trust_threshold: int = Field(default=50, description="Min score for the medium band")

    # Waitlist
    default_interest_area: InterestArea = Field(
        default=InterestArea.GENERAL,
        description="Interest area for signups that do not pick one",
    )


# Global config instance (can be overridden in tests)
DEFAULT_CONFIG = ServiceConfig()


def get_config() -> ServiceConfig:
    """Get the current service configuration."""
    return DEFAULT_CONFIG
