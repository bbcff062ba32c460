"""SQLModel database models for user aggregates and the waitlist."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID, uuid4

from sqlalchemy import String
from sqlmodel import Field, SQLModel


class InterestArea(StrEnum):
    """What a waitlist signup wants to use the analyzer for."""

    GENERAL = "general"
    DATING = "dating"
    INVESTMENT = "investment"
    PHISHING = "phishing"


class UserProfile(SQLModel, table=True):
    """Per-identity analysis aggregate. Maps to profiles table."""

    __tablename__ = "profiles"  # type: ignore[assignment]

    id: UUID = Field(primary_key=True)  # Identity provider user id
    email: str = Field(max_length=255, index=True)
    trust_score: int = Field(default=0)  # Running average of analyses
    profiles_analyzed: int = Field(default=0)
    reports_submitted: int = Field(default=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class WaitlistEntry(SQLModel, table=True):
    """Early access signups. Maps to waitlist table."""

    __tablename__ = "waitlist"  # type: ignore[assignment]

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True)
    name: str | None = Field(default=None, max_length=255)
    interest_area: InterestArea = Field(default=InterestArea.GENERAL, sa_type=String(20))
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
