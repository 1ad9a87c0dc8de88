"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the user service and
pagination. Routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.application.dtos.pagination import Pagination
from userapi.application.services.user_service import UserService
from userapi.core.config import get_settings
from userapi.infrastructure.persistence.database import get_db, get_db_transactional
from userapi.infrastructure.persistence.repositories import UserRepository


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """User service for read operations."""
    return UserService(UserRepository(db))


def get_user_service_for_write(
    db: AsyncSession = Depends(get_db_transactional),
) -> UserService:
    """User service for write operations (commit on success, rollback on error)."""
    return UserService(UserRepository(db))


def get_pagination(
    page: Annotated[int | None, Query(description="Zero-based page index")] = None,
    size: Annotated[int | None, Query(description="Page size")] = None,
) -> Pagination:
    """Parse page/size query parameters, clamped to configured bounds."""
    settings = get_settings()
    return Pagination.clamped(
        page,
        size,
        default_size=settings.default_page_size,
        max_size=settings.max_page_size,
    )
