"""Tests for analyze-and-record."""

from __future__ import annotations

from unittest.mock import MagicMock, patch
from uuid import UUID, uuid4

import pytest

from trustguard_db import StorageError
from trustguard_scoring import ProfileInput, TrustAggregate, TrustLevel
from trustguard_service.analysis import analyze_and_record, trust_level_for
from trustguard_service.config import ServiceConfig


class TestAnalyzeAndRecord:
    """Tests for analyze_and_record function."""

    def test_records_result(self, user_id: UUID, established_profile: ProfileInput) -> None:
        """Test the trust score lands in the user's aggregate."""
        recorded = analyze_and_record(user_id, established_profile)

        assert recorded.result.trust_score == 72
        assert recorded.trust_level == TrustLevel.MEDIUM
        assert recorded.aggregate.trust_score == 72
        assert recorded.aggregate.profiles_analyzed == 1

    def test_averages_multiple(
        self,
        user_id: UUID,
        established_profile: ProfileInput,
        new_account_profile: ProfileInput,
    ) -> None:
        """Test two analyses average their trust scores."""
        analyze_and_record(user_id, established_profile)
        recorded = analyze_and_record(user_id, new_account_profile)

        assert recorded.result.trust_score == 29
        assert recorded.trust_level == TrustLevel.LOW
        assert recorded.aggregate.trust_score == 51  # (72 + 29) / 2
        assert recorded.aggregate.profiles_analyzed == 2

    def test_unknown_user(self, database: None, ordinary_profile: ProfileInput) -> None:
        """Test unknown users surface a storage error."""
        with pytest.raises(StorageError):
            analyze_and_record(uuid4(), ordinary_profile)

    @patch("trustguard_service.analysis.record_analysis")
    def test_passes_trust_score(
        self,
        mock_record: MagicMock,
        ordinary_profile: ProfileInput,
    ) -> None:
        """Test only the trust score is handed to storage."""
        mock_record.return_value = TrustAggregate(trust_score=75, profiles_analyzed=1)
        user_id = uuid4()

        recorded = analyze_and_record(user_id, ordinary_profile)

        mock_record.assert_called_once_with(user_id, 75)
        assert recorded.trust_level == TrustLevel.HIGH


class TestTrustLevelFor:
    """Tests for trust_level_for function."""

    def test_configured_thresholds(self, ordinary_profile: ProfileInput) -> None:
        """Test bands follow the service configuration."""
        from trustguard_scoring import analyze_profile

        result = analyze_profile(ordinary_profile)
        strict = ServiceConfig(high_trust_threshold=90, medium_trust_threshold=60)

        assert trust_level_for(result) == TrustLevel.HIGH
        assert trust_level_for(result, strict) == TrustLevel.MEDIUM
