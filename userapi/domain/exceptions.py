"""Exceptions for failures that do not travel as outcome values.

Validation, lookup and business-rule results are returned as outcomes
(see userapi.domain.outcomes). What is left here is a duplicate email on
create, a row vanishing mid-update, an entity built in an invalid state,
and a missing database. core.exception_handlers turns each into a JSON
error body.
"""

from typing import Any


class UserApiException(Exception):
    """Root of the userapi exception tree.

    error_code selects the HTTP status in the exception handlers; it
    falls back to the class name. details is merged into the error body.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Error body: {error, message, details}."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(UserApiException):
    """An entity invariant was broken (e.g. UserEntity built with an empty email)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else {})


class ResourceNotFoundException(UserApiException):
    """A row the caller already looked up is gone (concurrent delete)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """
        Args:
            resource_type: Kind of row, e.g. 'user'.
            resource_id: Id that no longer resolves.
        """
        super().__init__(
            f"{resource_type} {resource_id} does not exist",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserAlreadyExistsException(UserApiException):
    """Raised when creating a user whose email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email is already registered",
            "USER_ALREADY_EXISTS",
            {"field": "email", "reason": "duplicate", "email": email},
        )


class DatabaseNotConfiguredException(UserApiException):
    """No engine could be created from DATABASE_URL."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
