"""User repository (SQLAlchemy). Interface methods return domain entities."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.domain.entities import UserEntity
from userapi.domain.enums import UserStatus
from userapi.domain.exceptions import ResourceNotFoundException, UserAlreadyExistsException
from userapi.infrastructure.persistence.models.user import UserModel
from userapi.shared.telemetry import get_logger

logger = get_logger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite returns naive datetimes; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_entity(u: UserModel) -> UserEntity:
    """Map ORM UserModel to domain UserEntity."""
    return UserEntity(
        id=u.id,
        name=u.name,
        email=u.email,
        status=UserStatus(u.status),
        created_at=_as_utc(u.created_at),
        updated_at=_as_utc(u.updated_at),
    )


class UserRepository:
    """User repository implementing IUserRepository over an AsyncSession.

    Flushes but never commits; the session dependency owns the transaction.
    A unique-email violation rolls the session back before raising, so the
    caller may still finish the request normally.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _flush(self, email: str) -> None:
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Unique email violation; transaction rolled back")
            raise UserAlreadyExistsException(email) from None

    async def add(self, name: str, email: str, status: UserStatus) -> UserEntity:
        """Create user; raise UserAlreadyExistsException on unique constraint violation."""
        user = UserModel(name=name, email=email, status=status.value)
        self.db.add(user)
        await self._flush(email)
        await self.db.refresh(user)
        return _to_entity(user)

    async def get_by_id(self, user_id: str) -> UserEntity | None:
        user = await self.db.get(UserModel, user_id)
        return _to_entity(user) if user else None

    async def get_by_email(self, email: str) -> UserEntity | None:
        result = await self.db.execute(select(UserModel).where(UserModel.email == email))
        user = result.scalar_one_or_none()
        return _to_entity(user) if user else None

    async def update(self, user: UserEntity) -> UserEntity:
        """Write name, email and status back; raise ResourceNotFoundException if the row is gone."""
        row = await self.db.get(UserModel, user.id)
        if row is None:
            raise ResourceNotFoundException("user", user.id)
        row.name = user.name
        row.email = user.email
        row.status = user.status.value
        await self._flush(user.email)
        await self.db.refresh(row)
        return _to_entity(row)

    async def delete_by_id(self, user_id: str) -> bool:
        result = await self.db.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.db.flush()
        return bool(result.rowcount)

    async def list_page(self, offset: int, limit: int) -> list[UserEntity]:
        result = await self.db.execute(
            select(UserModel)
            .order_by(UserModel.created_at, UserModel.id)
            .offset(offset)
            .limit(limit)
        )
        return [_to_entity(u) for u in result.scalars().all()]

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(UserModel))
        return int(result.scalar_one())
