"""Domain enumerations for the user service.

Enums represent fixed sets of domain values (e.g. user status).
"""

from enum import Enum


class UserStatus(str, Enum):
    """User lifecycle status.

    Determines which edits are allowed (see User.check_edit).
    """

    ACTIVE = "active"
    LOCKED = "locked"
    DISABLED = "disabled"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]
