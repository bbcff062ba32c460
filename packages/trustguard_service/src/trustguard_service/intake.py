"""Form intake: raw user input to ProfileInput.

The scoring engine assumes well-typed input. This module is where
untrusted values get coerced:

- counts that are blank, unparseable or negative become 0
- account age that is unparseable or below 1 becomes 1
- a missing account age uses the configured default
- an empty image URL means no image
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Self

from trustguard_scoring import Platform, ProfileInput
from trustguard_service.config import ServiceConfig, get_config

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

_COUNT_FIELDS = ("followers_count", "following_count", "posts_count")
_TRUTHY = frozenset({"1", "true", "yes", "on"})


class IntakeErrorCode(StrEnum):
    """Standardized intake error codes."""

    UNKNOWN_PLATFORM = "UNKNOWN_PLATFORM"
    INVALID_FORM = "INVALID_FORM"


class IntakeError(ValueError):
    """Form input that cannot be turned into a ProfileInput."""

    def __init__(self, code: IntakeErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @classmethod
    def unknown_platform(cls, value: object) -> Self:
        """Create unknown platform error."""
        supported = ", ".join(p.value for p in Platform)
        return cls(
            IntakeErrorCode.UNKNOWN_PLATFORM,
            f"Unknown platform: {value!r} (expected one of {supported})",
        )

    @classmethod
    def invalid_form(cls, reason: str) -> Self:
        """Create invalid form error."""
        return cls(IntakeErrorCode.INVALID_FORM, f"Invalid form: {reason}")


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of a form value.

    Mirrors browser integer parsing: "12abc" is 12, "3.9" is 3, and
    blank or non-numeric input yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None

    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_bool(value: Any) -> bool:
    """Interpret checkbox-style form values."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def parse_platform(value: Any, default: Platform) -> Platform:
    """Resolve a platform name, case-insensitively."""
    if value is None or value == "":
        return default
    if isinstance(value, Platform):
        return value
    try:
        return Platform(str(value).strip().lower())
    except ValueError as e:
        raise IntakeError.unknown_platform(value) from e


def _get(form: Mapping[str, Any], field: str) -> Any:
    """Look a field up by its snake_case name or its camelCase alias."""
    if field in form:
        return form[field]
    alias = ProfileInput.model_fields[field].alias
    return form.get(alias) if alias else None


def build_profile_input(
    form: Mapping[str, Any],
    config: ServiceConfig | None = None,
) -> ProfileInput:
    """Build a ProfileInput from raw form values.

    Args:
        form: Field values keyed by snake_case name or camelCase alias.
        config: Service defaults (uses global config if not provided).

    Returns:
        Well-typed ProfileInput ready for analyze_profile.

    Raises:
        IntakeError: If the platform is not supported.
    """
    config = config or get_config()

    counts = {field: max(parse_int(_get(form, field)) or 0, 0) for field in _COUNT_FIELDS}

    raw_age = _get(form, "account_age_in_days")
    if raw_age is None or raw_age == "":
        account_age = config.default_account_age_days
    else:
        account_age = max(parse_int(raw_age) or 1, 1)

    image_url = _get(form, "profile_image_url")

    return ProfileInput(
        username=str(_get(form, "username") or ""),
        bio=str(_get(form, "bio") or ""),
        account_age_in_days=account_age,
        is_verified=parse_bool(_get(form, "is_verified")),
        profile_image_url=str(image_url) if image_url else None,
        platform=parse_platform(_get(form, "platform"), config.default_platform),
        **counts,
    )
