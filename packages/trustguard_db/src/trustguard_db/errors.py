"""Storage error types."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from uuid import UUID


class StorageErrorCode(StrEnum):
    """Standardized storage error codes."""

    DATABASE_URL_MISSING = "DATABASE_URL_MISSING"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    PROFILE_EXISTS = "PROFILE_EXISTS"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"


class StorageError(Exception):
    """Storage error with standardized error codes."""

    def __init__(self, code: StorageErrorCode, message: str) -> None:
        """Initialize storage error.

        Args:
            code: Standardized error code.
            message: Human-readable error message.
        """
        super().__init__(message)
        self.code = code
        self.message = message

    def is_code(self, code: StorageErrorCode) -> bool:
        """Check if this error matches a specific code."""
        return self.code == code

    @classmethod
    def database_url_missing(cls) -> Self:
        """Create missing database configuration error."""
        return cls(
            StorageErrorCode.DATABASE_URL_MISSING,
            "DATABASE_URL environment variable not set",
        )

    @classmethod
    def duplicate_email(cls) -> Self:
        """Create duplicate waitlist email error."""
        return cls(
            StorageErrorCode.DUPLICATE_EMAIL,
            "This email is already on the waitlist",
        )

    @classmethod
    def profile_exists(cls, user_id: UUID) -> Self:
        """Create duplicate profile error."""
        return cls(
            StorageErrorCode.PROFILE_EXISTS,
            f"Profile already exists: {user_id}",
        )

    @classmethod
    def profile_not_found(cls, user_id: UUID) -> Self:
        """Create profile not found error."""
        return cls(
            StorageErrorCode.PROFILE_NOT_FOUND,
            f"Profile not found: {user_id}",
        )
