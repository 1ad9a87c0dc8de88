"""Domain layer: entities, enums, outcome unions, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from userapi.domain.entities import UserChanges, UserEntity
from userapi.domain.enums import UserStatus
from userapi.domain.exceptions import (
    DatabaseNotConfiguredException,
    ResourceNotFoundException,
    UserAlreadyExistsException,
    UserApiException,
    ValidationException,
)

__all__ = [
    # Entities
    "UserChanges",
    "UserEntity",
    # Enums
    "UserStatus",
    # Exceptions
    "DatabaseNotConfiguredException",
    "ResourceNotFoundException",
    "UserAlreadyExistsException",
    "UserApiException",
    "ValidationException",
]
