"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from userapi.domain.entities import UserChanges, UserEntity
from userapi.domain.enums import UserStatus


@dataclass(frozen=True)
class UserCreate:
    """Validated create payload."""

    name: str
    email: str


@dataclass(frozen=True)
class UserEdit:
    """Validated edit payload. None means the field was not sent."""

    name: str | None = None
    email: str | None = None
    status: UserStatus | None = None

    def to_changes(self) -> UserChanges:
        return UserChanges(name=self.name, email=self.email, status=self.status)


@dataclass(frozen=True)
class UserInfo:
    """User read-model (result of get_info, edit, list)."""

    id: str
    name: str
    email: str
    status: UserStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserInfo":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
