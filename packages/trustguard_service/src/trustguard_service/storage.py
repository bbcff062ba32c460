"""Database storage operations.

This module handles ALL persistence around the scoring engine:
- Creating per-user aggregate rows
- Folding analysis results into the running trust score
- Counting submitted reports
- Waitlist signups
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from trustguard_db import InterestArea, StorageError, UserProfile, WaitlistEntry, get_session
from trustguard_scoring import TrustAggregate
from trustguard_service.config import get_config
from trustguard_utils import get_logger

if TYPE_CHECKING:
    from uuid import UUID

    from sqlmodel import Session

log = get_logger("trustguard_service.storage")


def _to_aggregate(profile: UserProfile) -> TrustAggregate:
    return TrustAggregate(
        trust_score=profile.trust_score or 0,
        profiles_analyzed=profile.profiles_analyzed or 0,
        reports_submitted=profile.reports_submitted or 0,
    )


def _lock_profile(session: Session, user_id: UUID) -> UserProfile:
    """Load a profile row for update, serializing concurrent writers."""
    profile = session.get(UserProfile, user_id, with_for_update=True)
    if profile is None:
        raise StorageError.profile_not_found(user_id)
    return profile


def _apply_aggregate(profile: UserProfile, aggregate: TrustAggregate) -> None:
    profile.trust_score = aggregate.trust_score
    profile.profiles_analyzed = aggregate.profiles_analyzed
    profile.reports_submitted = aggregate.reports_submitted
    profile.updated_at = datetime.now(UTC)


def create_user_profile(user_id: UUID, email: str) -> TrustAggregate:
    """Create the aggregate row for a newly signed up identity.

    Args:
        user_id: Id issued by the identity provider.
        email: Account email.

    Returns:
        The empty aggregate.

    Raises:
        StorageError: If a row already exists for user_id.
    """
    with get_session() as session:
        if session.get(UserProfile, user_id) is not None:
            raise StorageError.profile_exists(user_id)

        profile = UserProfile(id=user_id, email=email)
        session.add(profile)

        try:
            session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same identity
            raise StorageError.profile_exists(user_id) from e

        aggregate = _to_aggregate(profile)

    log.info("user_profile_created", user_id=str(user_id))
    return aggregate


def get_user_aggregate(user_id: UUID) -> TrustAggregate:
    """Read the current aggregate for a user.

    Raises:
        StorageError: If the user has no profile row.
    """
    with get_session() as session:
        profile = session.get(UserProfile, user_id)
        if profile is None:
            raise StorageError.profile_not_found(user_id)
        return _to_aggregate(profile)


def record_analysis(user_id: UUID, trust_score: int) -> TrustAggregate:
    """Fold one analysis into the user's running trust score.

    The read and the write happen in one transaction with the row locked,
    so concurrent analyses for the same user are not lost.

    Args:
        user_id: User who ran the analysis.
        trust_score: AnalysisResult.trust_score to record.

    Returns:
        The updated aggregate.
    """
    with get_session() as session:
        profile = _lock_profile(session, user_id)
        aggregate = _to_aggregate(profile).record_analysis(trust_score)
        _apply_aggregate(profile, aggregate)
        session.add(profile)

    log.info(
        "analysis_recorded",
        user_id=str(user_id),
        trust_score=aggregate.trust_score,
        profiles_analyzed=aggregate.profiles_analyzed,
    )
    return aggregate


def record_report(user_id: UUID) -> TrustAggregate:
    """Count one more report submitted by the user."""
    with get_session() as session:
        profile = _lock_profile(session, user_id)
        aggregate = _to_aggregate(profile).record_report()
        _apply_aggregate(profile, aggregate)
        session.add(profile)

    log.info("report_recorded", user_id=str(user_id), reports=aggregate.reports_submitted)
    return aggregate


def join_waitlist(
    email: str,
    name: str | None = None,
    interest_area: InterestArea | None = None,
) -> UUID:
    """Add an email to the early access waitlist.

    Args:
        email: Signup email, unique across the waitlist.
        name: Optional display name; blank becomes None.
        interest_area: What the signup wants to analyze; None uses the
            configured default.

    Returns:
        Id of the new waitlist entry.

    Raises:
        StorageError: DUPLICATE_EMAIL if the email already signed up.
    """
    if interest_area is None:
        interest_area = get_config().default_interest_area

    with get_session() as session:
        existing = session.exec(select(WaitlistEntry).where(WaitlistEntry.email == email)).first()
        if existing is not None:
            log.info("waitlist_duplicate_email")
            raise StorageError.duplicate_email()

        entry = WaitlistEntry(email=email, name=name or None, interest_area=interest_area)
        session.add(entry)
        entry_id = entry.id

        try:
            session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            log.info("waitlist_duplicate_email")
            raise StorageError.duplicate_email() from e

    log.info("waitlist_joined", interest_area=interest_area)
    return entry_id
