"""Image, text and behavior sub-scores.

Each calculator starts from a fixed baseline, applies additive
penalties/bonuses and clamps the result to 0-100.
"""

from __future__ import annotations

from trustguard_scoring.keywords import (
    GENERIC_WORDS,
    STOCK_IMAGE_MARKERS,
    SUSPICIOUS_KEYWORDS,
    count_emoji,
    matching_phrases,
)
from trustguard_scoring.types import Platform

MIN_SCORE = 0
MAX_SCORE = 100

# Image baselines
NO_IMAGE_SCORE = 30
STOCK_IMAGE_SCORE = 40
UNIQUE_IMAGE_SCORE = 75

# Text penalties
TEXT_BASE_SCORE = 80
SUSPICIOUS_KEYWORD_PENALTY = 15
GENERIC_WORD_PENALTY = 5
SHORT_BIO_LENGTH = 20
SHORT_BIO_PENALTY = 20
INSTAGRAM_LINK_PENALTY = 25
MAX_EMOJI = 5
EMOJI_PENALTY = 15

# Behavior penalties
BEHAVIOR_BASE_SCORE = 70


def _clamp(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def compute_image_score(image_url: str | None) -> int:
    """Score the profile image from its URL alone.

    Placeholder heuristic: no image is fetched. Stock-photo hosts are
    matched case-sensitively.
    """
    if not image_url:
        return NO_IMAGE_SCORE

    if any(marker in image_url for marker in STOCK_IMAGE_MARKERS):
        return STOCK_IMAGE_SCORE

    return UNIQUE_IMAGE_SCORE


def compute_text_score(bio: str, platform: Platform | str) -> int:
    """Score bio text for scam, spam and template language.

    Args:
        bio: Profile bio, original case.
        platform: Platform the profile lives on.

    Returns:
        Score in 0-100, higher is more trustworthy.
    """
    lower_bio = bio.lower()
    score = TEXT_BASE_SCORE

    score -= len(matching_phrases(lower_bio, SUSPICIOUS_KEYWORDS)) * SUSPICIOUS_KEYWORD_PENALTY
    score -= len(matching_phrases(lower_bio, GENERIC_WORDS)) * GENERIC_WORD_PENALTY

    if len(bio) < SHORT_BIO_LENGTH:
        score -= SHORT_BIO_PENALTY

    # Link-in-bio is only treated as suspicious on Instagram
    if "http" in bio and platform == Platform.INSTAGRAM:
        score -= INSTAGRAM_LINK_PENALTY

    if count_emoji(bio) > MAX_EMOJI:
        score -= EMOJI_PENALTY

    return _clamp(score)


def compute_behavior_score(
    followers: int,
    following: int,
    posts: int,
    account_age_days: int,
    verified: bool,
) -> int:
    """Score account activity patterns.

    Args:
        followers: Follower count.
        following: Following count.
        posts: Number of posts.
        account_age_days: Account age in days.
        verified: Platform verification flag.

    Returns:
        Score in 0-100, higher is more trustworthy.
    """
    score = BEHAVIOR_BASE_SCORE

    if followers == 0 or following == 0:
        score -= 20

    # ratio is 0 when following is 0; that case takes both ratio penalties
    ratio = followers / following if following > 0 else 0
    if ratio > 10 or ratio < 0.1:
        score -= 15
    if ratio == 0:
        score -= 25

    if posts == 0:
        score -= 15
    elif posts > 0:
        post_frequency = posts / max(account_age_days, 1)
        if post_frequency > 10:
            score -= 10  # Bot-like posting rate
        if post_frequency < 0.1:
            score -= 15  # Dormant account

    if account_age_days < 7:
        score -= 30
    elif account_age_days < 30:
        score -= 15

    if verified:
        score += 20

    # Established high-reach account
    if followers > 100_000 and posts > 100 and account_age_days > 365:
        score += 15

    return _clamp(score)
