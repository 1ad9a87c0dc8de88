"""ORM models. Importing this package registers every table on Base.metadata."""

from userapi.infrastructure.persistence.models.user import UserModel

__all__ = ["UserModel"]
