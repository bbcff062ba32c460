"""Tests for the command line interface."""

from __future__ import annotations

import io
import json

import pytest
from sqlmodel import select

from trustguard_db import InterestArea, WaitlistEntry, get_session
from trustguard_service.cli import main


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON output carries the camelCase payload."""
        exit_code = main(
            [
                "analyze",
                "--platform",
                "linkedin",
                "--bio",
                "Experienced engineer building reliable systems for over a decade.",
                "--followers",
                "500000",
                "--following",
                "300",
                "--posts",
                "2000",
                "--age",
                "1000",
                "--verified",
                "--json",
            ]
        )

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert payload["trustScore"] == 72
        assert payload["confidence"] == 84
        assert payload["analysis"] == {"imageScore": 30, "textScore": 80, "behaviorScore": 90}
        assert payload["redFlags"] == ["Generic or suspicious profile image"]

    def test_table_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the default output lists scores and red flags."""
        exit_code = main(["analyze", "--platform", "twitter", "--age", "2"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Trust score" in out
        assert "Very new account (less than 7 days old)" in out
        assert "Not verified on Twitter" in out

    def test_stdin_form(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test form fields can be piped in as JSON."""
        form = {"platform": "instagram", "bio": "", "followersCount": "0", "accountAgeInDays": "1"}
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(form)))

        exit_code = main(["analyze", "--stdin", "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert payload["trustScore"] == 29

    def test_unknown_platform(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test unsupported platforms exit with a usage error."""
        monkeypatch.setattr("sys.stdin", io.StringIO('{"platform": "myspace"}'))

        exit_code = main(["analyze", "--stdin"])

        assert exit_code == 2
        assert "Unknown platform" in capsys.readouterr().out

    @pytest.mark.parametrize("stdin", ["{not json", "[1, 2, 3]", '"instagram"'])
    def test_malformed_stdin(
        self,
        stdin: str,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test piped input that is not a JSON object exits with a usage error."""
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))

        exit_code = main(["analyze", "--stdin"])

        assert exit_code == 2
        assert "Invalid form" in capsys.readouterr().out


class TestWaitlistCommand:
    """Tests for the waitlist command."""

    def test_join_then_duplicate(self, database: None, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a second signup with the same email is refused."""
        assert main(["waitlist", "cli@example.com", "--interest", "phishing"]) == 0
        assert main(["waitlist", "cli@example.com"]) == 1
        assert "already on the waitlist" in capsys.readouterr().out

    def test_default_interest(self, database: None) -> None:
        """Test omitting --interest stores the configured default."""
        assert main(["waitlist", "plain@example.com"]) == 0

        with get_session() as session:
            entry = session.exec(
                select(WaitlistEntry).where(WaitlistEntry.email == "plain@example.com")
            ).one()
            assert entry.interest_area == InterestArea.GENERAL


class TestMain:
    """Tests for main entry point."""

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test running without a command prints help."""
        assert main([]) == 0
        assert "analyze" in capsys.readouterr().out
