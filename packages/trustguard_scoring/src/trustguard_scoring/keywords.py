"""Lexical tables used by the text heuristics and red-flag checks.

All phrases are lowercase and matched as plain substrings of the
lowercased bio, so "crypto" also matches inside "cryptocurrency".
"""

from __future__ import annotations

import re

SUSPICIOUS_KEYWORDS: tuple[str, ...] = (
    "make money",
    "quick cash",
    "guarantee",
    "limited time",
    "urgent",
    "click here",
    "verify account",
    "confirm identity",
    "update payment",
    "congratulations won",
    "claim prize",
    "bitcoin",
    "crypto",
    "investment opportunity",
    "no experience needed",
    "work from home",
)

GENERIC_WORDS: tuple[str, ...] = (
    "hello",
    "hi there",
    "beautiful",
    "gorgeous",
    "handsome",
    "love travel",
    "love fitness",
    "adventure",
)

# Stock photo hosts; matched case-sensitively against the raw URL.
STOCK_IMAGE_MARKERS: tuple[str, ...] = ("stock", "unsplash", "pexels")

# Copyright/registered signs, general punctuation through CJK compatibility,
# and the supplementary pictograph planes U+1F000-U+1FBFF.
EMOJI_PATTERN = re.compile("[\u00a9\u00ae\u2000-\u3300\U0001F000-\U0001FBFF]")


def matching_phrases(text: str, phrases: tuple[str, ...]) -> list[str]:
    """Return the phrases that occur in text, each at most once."""
    return [phrase for phrase in phrases if phrase in text]


def count_emoji(text: str) -> int:
    """Count emoji-range code points in text."""
    return len(EMOJI_PATTERN.findall(text))
