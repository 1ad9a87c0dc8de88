"""Pytest configuration and fixtures for userapi.

HTTP tests run against a fresh app from userapi.main.create_app with the
user service dependencies overridden to use an in-memory repository, so
no database is needed. Repository tests in tests/integration build their
own SQLite engine.
"""

import os
from dataclasses import replace
from datetime import UTC, datetime, timedelta

# Settings are read at import of userapi.main; keep tests off the on-disk database.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")
os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from userapi.api.v1.dependencies import get_user_service, get_user_service_for_write
from userapi.application.services.user_service import UserService
from userapi.core.config import get_settings
from userapi.domain.entities import UserEntity
from userapi.domain.enums import UserStatus
from userapi.domain.exceptions import ResourceNotFoundException, UserAlreadyExistsException
from userapi.main import create_app

_EPOCH = datetime(2025, 1, 1, tzinfo=UTC)


class InMemoryUserRepository:
    """IUserRepository over a dict. Ids are u1, u2, ... unless seeded explicitly."""

    def __init__(self) -> None:
        self._users: dict[str, UserEntity] = {}
        self._seq = 0

    def _tick(self) -> datetime:
        self._seq += 1
        return _EPOCH + timedelta(seconds=self._seq)

    def _email_taken(self, email: str, exclude_id: str | None = None) -> bool:
        return any(u.email == email and u.id != exclude_id for u in self._users.values())

    def seed(
        self,
        user_id: str,
        name: str = "Seeded User",
        email: str | None = None,
        status: UserStatus = UserStatus.ACTIVE,
    ) -> UserEntity:
        now = self._tick()
        user = UserEntity(
            id=user_id,
            name=name,
            email=email or f"{user_id}@example.com",
            status=status,
            created_at=now,
            updated_at=now,
        )
        self._users[user_id] = user
        return user

    async def add(self, name: str, email: str, status: UserStatus) -> UserEntity:
        if self._email_taken(email):
            raise UserAlreadyExistsException(email)
        return self.seed(f"u{self._seq + 1}", name=name, email=email, status=status)

    async def get_by_id(self, user_id: str) -> UserEntity | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> UserEntity | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def update(self, user: UserEntity) -> UserEntity:
        if user.id not in self._users:
            raise ResourceNotFoundException("user", user.id)
        if self._email_taken(user.email, exclude_id=user.id):
            raise UserAlreadyExistsException(user.email)
        stored = replace(user, updated_at=self._tick())
        self._users[user.id] = stored
        return stored

    async def delete_by_id(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None

    async def list_page(self, offset: int, limit: int) -> list[UserEntity]:
        ordered = sorted(self._users.values(), key=lambda u: (u.created_at, u.id))
        return ordered[offset : offset + limit]

    async def count(self) -> int:
        return len(self._users)


@pytest.fixture
def fake_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def user_service(fake_repo: InMemoryUserRepository) -> UserService:
    return UserService(fake_repo)


@pytest.fixture
def app(user_service: UserService) -> FastAPI:
    """Fresh app whose user service is backed by the in-memory repository."""
    get_settings.cache_clear()
    application = create_app()
    application.dependency_overrides[get_user_service] = lambda: user_service
    application.dependency_overrides[get_user_service_for_write] = lambda: user_service
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
