"""Domain entities: business concepts independent of persistence."""

from userapi.domain.entities.user import ALLOWED_TRANSITIONS, UserChanges, UserEntity

__all__ = ["ALLOWED_TRANSITIONS", "UserChanges", "UserEntity"]
