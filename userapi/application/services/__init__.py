"""Application services: user use cases and payload validation."""

from userapi.application.services.user_logic_validator import UserLogicValidator
from userapi.application.services.user_service import UserService

__all__ = ["UserLogicValidator", "UserService"]
