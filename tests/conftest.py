"""Pytest fixtures and configuration."""

from __future__ import annotations

import os

# Set environment variables BEFORE any imports that might load settings
# This is necessary because settings are cached at import time
os.environ.setdefault("APP_MODE", "development")
os.environ.setdefault("LOG_LEVEL", "silent")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Iterator
from uuid import UUID, uuid4

import pytest
from sqlmodel import SQLModel

from trustguard_scoring import Platform, ProfileInput


@pytest.fixture
def database() -> Iterator[None]:
    """Fresh in-memory SQLite schema for each test."""
    from trustguard_db import get_engine, init_db

    get_engine.cache_clear()
    init_db()
    yield
    SQLModel.metadata.drop_all(get_engine())
    get_engine.cache_clear()


@pytest.fixture
def user_id(database: None) -> UUID:
    """Id of a user that already has an aggregate row."""
    from trustguard_service.storage import create_user_profile

    new_id = uuid4()
    create_user_profile(new_id, "analyst@example.com")
    return new_id


@pytest.fixture
def new_account_profile() -> ProfileInput:
    """Brand-new account with no activity and an empty bio."""
    return ProfileInput(
        bio="",
        followers_count=0,
        following_count=0,
        posts_count=0,
        account_age_in_days=1,
        is_verified=False,
        platform=Platform.INSTAGRAM,
    )


@pytest.fixture
def established_profile() -> ProfileInput:
    """Long-lived, verified, high-reach account with a clean bio."""
    return ProfileInput(
        username="eng_lead",
        bio="Experienced engineer building reliable systems for over a decade.",
        followers_count=500_000,
        following_count=300,
        posts_count=2000,
        account_age_in_days=1000,
        is_verified=True,
        platform=Platform.LINKEDIN,
    )


@pytest.fixture
def ordinary_profile() -> ProfileInput:
    """Regular active account that trips no heuristic."""
    return ProfileInput(
        username="jordan",
        bio="Amateur photographer and weekend cyclist based in Lisbon.",
        followers_count=500,
        following_count=400,
        posts_count=100,
        account_age_in_days=365,
        is_verified=False,
        profile_image_url="https://cdn.example.com/avatars/jordan.jpg",
        platform=Platform.FACEBOOK,
    )
