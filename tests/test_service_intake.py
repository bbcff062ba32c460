"""Tests for form intake."""

from __future__ import annotations

import pytest

from trustguard_scoring import Platform
from trustguard_service.config import ServiceConfig
from trustguard_service.intake import (
    IntakeError,
    IntakeErrorCode,
    build_profile_input,
    parse_bool,
    parse_int,
    parse_platform,
)


class TestParseInt:
    """Tests for parse_int function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("42", 42),
            (" 7", 7),
            ("12abc", 12),
            ("3.9", 3),
            ("-4", -4),
            (15, 15),
            (4.7, 4),
            ("", None),
            ("abc", None),
            (None, None),
            (True, None),
            (float("nan"), None),
        ],
    )
    def test_values(self, value: object, expected: int | None) -> None:
        """Test leading-integer parsing of form values."""
        assert parse_int(value) == expected


class TestParseBool:
    """Tests for parse_bool function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, True), (False, False), (None, False), ("on", True), ("TRUE", True), ("false", False)],
    )
    def test_values(self, value: object, expected: bool) -> None:
        """Test checkbox-style values."""
        assert parse_bool(value) is expected


class TestParsePlatform:
    """Tests for parse_platform function."""

    def test_case_insensitive(self) -> None:
        """Test platform names ignore case and whitespace."""
        assert parse_platform(" Twitter ", Platform.INSTAGRAM) == Platform.TWITTER

    def test_default(self) -> None:
        """Test blank platform falls back to the default."""
        assert parse_platform("", Platform.INSTAGRAM) == Platform.INSTAGRAM
        assert parse_platform(None, Platform.TINDER) == Platform.TINDER

    def test_unknown(self) -> None:
        """Test unsupported platforms raise IntakeError."""
        with pytest.raises(IntakeError) as exc_info:
            parse_platform("myspace", Platform.INSTAGRAM)

        assert exc_info.value.code == IntakeErrorCode.UNKNOWN_PLATFORM
        assert "myspace" in exc_info.value.message


class TestBuildProfileInput:
    """Tests for build_profile_input function."""

    def test_coerces_counts(self) -> None:
        """Test unparseable and negative counts become zero."""
        profile = build_profile_input(
            {
                "platform": "twitter",
                "bio": "Weekend cyclist",
                "followersCount": "12abc",
                "following_count": "-4",
                "postsCount": "",
            }
        )

        assert profile.followers_count == 12
        assert profile.following_count == 0
        assert profile.posts_count == 0
        assert profile.platform == Platform.TWITTER

    def test_default_account_age(self) -> None:
        """Test missing account age uses the configured default."""
        assert build_profile_input({}).account_age_in_days == 30

        config = ServiceConfig(default_account_age_days=90)
        assert build_profile_input({}, config).account_age_in_days == 90

    @pytest.mark.parametrize(("raw", "expected"), [("0", 1), ("abc", 1), ("-3", 1), (45, 45)])
    def test_account_age_floor(self, raw: object, expected: int) -> None:
        """Test account age never drops below one day."""
        assert build_profile_input({"accountAgeInDays": raw}).account_age_in_days == expected

    def test_default_platform(self) -> None:
        """Test missing platform uses the configured default."""
        assert build_profile_input({}).platform == Platform.INSTAGRAM

    def test_unknown_platform(self) -> None:
        """Test unsupported platforms are rejected before scoring."""
        with pytest.raises(IntakeError):
            build_profile_input({"platform": "myspace"})

    def test_empty_image_url(self) -> None:
        """Test a blank image URL means no image."""
        assert build_profile_input({"profileImageUrl": ""}).profile_image_url is None
        assert (
            build_profile_input({"profile_image_url": "https://a.example/me.jpg"}).profile_image_url
            == "https://a.example/me.jpg"
        )

    def test_verified_flag(self) -> None:
        """Test the verified checkbox value is interpreted."""
        assert build_profile_input({"isVerified": "on"}).is_verified is True
        assert build_profile_input({"is_verified": "false"}).is_verified is False

    def test_missing_bio(self) -> None:
        """Test missing text fields become empty strings."""
        profile = build_profile_input({"bio": None})

        assert profile.bio == ""
        assert profile.username == ""


class TestIntakeError:
    """Tests for IntakeError constructors."""

    def test_invalid_form(self) -> None:
        """Test invalid form errors carry their code and reason."""
        error = IntakeError.invalid_form("stdin must hold a JSON object")

        assert error.code == IntakeErrorCode.INVALID_FORM
        assert error.message == "Invalid form: stdin must hold a JSON object"
        assert isinstance(error, ValueError)
