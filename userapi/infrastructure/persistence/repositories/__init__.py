"""SQLAlchemy repositories."""

from userapi.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = ["UserRepository"]
