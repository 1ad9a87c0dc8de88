"""Field-level validation of user create/edit payloads.

Produces ValidationOutcome values instead of raising: Invalid carries a
{"field", "reason"} detail for the first failing field, Valid carries the
typed payload DTO. Rules are expressed as pydantic models; pydantic error
types are mapped to stable reason codes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from userapi.application.dtos.user import UserCreate, UserEdit
from userapi.domain.enums import UserStatus
from userapi.domain.outcomes import Invalid, Valid, ValidationOutcome

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 64
EMAIL_MAX_LENGTH = 254
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# pydantic error type -> reason code
_REASONS: dict[str, str] = {
    "missing": "required",
    "string_too_short": "too_short",
    "string_too_long": "too_long",
    "string_pattern_mismatch": "invalid_format",
}


class _UserCreateInput(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)


class _UserEditInput(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str | None = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    email: str | None = Field(
        default=None, max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN
    )
    status: UserStatus | None = None


def _first_error_detail(exc: ValidationError) -> dict[str, Any]:
    """Map the first pydantic error to {"field", "reason"}."""
    error = exc.errors()[0]
    loc = error.get("loc") or (None,)
    return {
        "field": str(loc[0]) if loc[0] is not None else None,
        "reason": _REASONS.get(error["type"], "invalid_value"),
    }


class UserLogicValidator:
    """Validates user payloads shared by the create and edit endpoints."""

    @staticmethod
    def validate_create(payload: Mapping[str, Any]) -> ValidationOutcome[UserCreate]:
        try:
            data = _UserCreateInput.model_validate(dict(payload))
        except ValidationError as e:
            return Invalid(_first_error_detail(e))
        return Valid(UserCreate(name=data.name, email=data.email.lower()))

    @staticmethod
    def validate_edit(payload: Mapping[str, Any]) -> ValidationOutcome[UserEdit]:
        """Validate a partial edit; at least one known field must be non-null."""
        try:
            data = _UserEditInput.model_validate(dict(payload))
        except ValidationError as e:
            return Invalid(_first_error_detail(e))
        if data.name is None and data.email is None and data.status is None:
            return Invalid({"field": None, "reason": "empty_edit"})
        return Valid(
            UserEdit(
                name=data.name,
                email=data.email.lower() if data.email is not None else None,
                status=data.status,
            )
        )
