"""Base Pydantic models with strict validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base model for profile inputs and analysis results.

    - No type coercion (strict=True)
    - Immutable after creation (frozen=True)
    - Fail on unknown fields (extra="forbid")
    - Enum fields store their plain value (use_enum_values=True)

    Strict mode rejects the plain enum values and lists that model_dump()
    produces, so stored dumps are reloaded with from_payload().
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
    )

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> Self:
        """Rebuild a model from its own model_dump() or camelCase payload.

        Validates in lax mode so enum values and lists are accepted.
        Unknown fields are still rejected.
        """
        return cls.model_validate(data, strict=False)
