"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from userapi.domain.entities import UserEntity
    from userapi.domain.enums import UserStatus


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def add(self, name: str, email: str, status: UserStatus) -> UserEntity:
        """Persist a new user. Raises UserAlreadyExistsException on duplicate email."""

    async def get_by_id(self, user_id: str) -> UserEntity | None:
        """Return the user with this id, or None."""

    async def get_by_email(self, email: str) -> UserEntity | None:
        """Return the user with this email, or None."""

    async def update(self, user: UserEntity) -> UserEntity:
        """Persist changed fields. Raises UserAlreadyExistsException on duplicate email."""

    async def delete_by_id(self, user_id: str) -> bool:
        """Delete the user; return whether a row was removed."""

    async def list_page(self, offset: int, limit: int) -> list[UserEntity]:
        """Return users ordered by created_at then id."""

    async def count(self) -> int:
        """Return total number of users."""
