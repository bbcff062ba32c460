"""Human-readable red flags explaining a trust score."""

from __future__ import annotations

from typing import TYPE_CHECKING

from trustguard_scoring.keywords import SUSPICIOUS_KEYWORDS, matching_phrases
from trustguard_scoring.types import Platform

if TYPE_CHECKING:
    from trustguard_scoring.types import ProfileInput

FLAG_NEW_ACCOUNT = "Very new account (less than 7 days old)"
FLAG_NO_FOLLOWERS = "No followers"
FLAG_NO_POSTS = "No posts on record"
FLAG_FOLLOWER_RATIO = "Unusual follower-to-following ratio"
FLAG_SUSPICIOUS_KEYWORDS = "Bio contains suspicious keywords"
FLAG_SHORT_BIO = "Unusually short bio"
FLAG_GENERIC_IMAGE = "Generic or suspicious profile image"
FLAG_SPAM_TEXT = "Bio contains spam-like language"
FLAG_UNUSUAL_BEHAVIOR = "Unusual account behavior patterns"
FLAG_UNVERIFIED_TWITTER = "Not verified on Twitter"

LOW_SUB_SCORE = 50


def extract_red_flags(
    profile: ProfileInput,
    image_score: int,
    text_score: int,
    behavior_score: int,
) -> list[str]:
    """Collect red flags for a profile.

    Checks always run in the same order, so the returned list is stable
    for a given input.

    Args:
        profile: The analyzed profile.
        image_score: Result of compute_image_score.
        text_score: Result of compute_text_score.
        behavior_score: Result of compute_behavior_score.

    Returns:
        Flag messages in check order, possibly empty.
    """
    flags: list[str] = []
    bio = profile.bio

    if profile.account_age_in_days < 7:
        flags.append(FLAG_NEW_ACCOUNT)

    if profile.followers_count == 0:
        flags.append(FLAG_NO_FOLLOWERS)

    if profile.posts_count == 0:
        flags.append(FLAG_NO_POSTS)

    if (
        profile.following_count > 0
        and profile.followers_count / profile.following_count < 0.2
    ):
        flags.append(FLAG_FOLLOWER_RATIO)

    if matching_phrases(bio.lower(), SUSPICIOUS_KEYWORDS):
        flags.append(FLAG_SUSPICIOUS_KEYWORDS)

    # An empty bio is not "short"
    if 0 < len(bio) < 20:
        flags.append(FLAG_SHORT_BIO)

    if image_score < LOW_SUB_SCORE:
        flags.append(FLAG_GENERIC_IMAGE)

    if text_score < LOW_SUB_SCORE:
        flags.append(FLAG_SPAM_TEXT)

    if behavior_score < LOW_SUB_SCORE:
        flags.append(FLAG_UNUSUAL_BEHAVIOR)

    if profile.platform == Platform.TWITTER and not profile.is_verified:
        flags.append(FLAG_UNVERIFIED_TWITTER)

    return flags
