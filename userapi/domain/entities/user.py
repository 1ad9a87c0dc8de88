"""User domain entity.

Represents the business concept of a user, independent of persistence.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from userapi.domain.enums import UserStatus
from userapi.domain.exceptions import ValidationException
from userapi.domain.outcomes import Accepted, BusinessOutcome, Rejected

# Allowed status edges; same-status changes are no-ops and always allowed.
ALLOWED_TRANSITIONS: dict[UserStatus, frozenset[UserStatus]] = {
    UserStatus.ACTIVE: frozenset({UserStatus.LOCKED, UserStatus.DISABLED}),
    UserStatus.LOCKED: frozenset({UserStatus.ACTIVE, UserStatus.DISABLED}),
    UserStatus.DISABLED: frozenset(),
}


@dataclass(frozen=True)
class UserChanges:
    """Requested field changes for an edit. None means unchanged."""

    name: str | None = None
    email: str | None = None
    status: UserStatus | None = None


@dataclass
class UserEntity:
    """Domain entity for user (SRP: business rules separate from persistence).

    Encapsulates the status lifecycle (active/locked/disabled) and the
    edit rule. Validation runs on construction.
    """

    id: str
    name: str
    email: str
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime | None = field(default=None, compare=False)
    updated_at: datetime | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate user invariants. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("User ID is required", field="id")
        if not self.name or not self.name.strip():
            raise ValidationException("User name is required", field="name")
        if not self.email:
            raise ValidationException("User email is required", field="email")

    def can_transition_to(self, target: UserStatus) -> bool:
        """Return whether status may move from the current value to target."""
        return target == self.status or target in ALLOWED_TRANSITIONS[self.status]

    def check_edit(self, changes: UserChanges) -> BusinessOutcome[UserChanges]:
        """Apply the edit rules without mutating the entity.

        A locked user accepts only edits that change nothing, or that move
        status to active and leave name and email as they are. Status
        changes must follow ALLOWED_TRANSITIONS.

        Returns:
            Accepted(changes) when allowed, Rejected(detail) otherwise.
        """
        if self.status == UserStatus.LOCKED and not self._only_unlocks(changes):
            return Rejected({"reason": "locked"})
        if changes.status is not None and not self.can_transition_to(changes.status):
            return Rejected(
                {
                    "reason": "illegal_transition",
                    "from": self.status.value,
                    "to": changes.status.value,
                }
            )
        return Accepted(changes)

    def apply(self, changes: UserChanges) -> "UserEntity":
        """Return a copy with changes applied (call after check_edit accepted)."""
        return replace(
            self,
            name=changes.name if changes.name is not None else self.name,
            email=changes.email if changes.email is not None else self.email,
            status=changes.status if changes.status is not None else self.status,
        )

    def _only_unlocks(self, changes: UserChanges) -> bool:
        """True when the edit changes nothing except (optionally) status -> active."""
        name_kept = changes.name is None or changes.name == self.name
        email_kept = changes.email is None or changes.email == self.email
        status_ok = changes.status in (None, self.status, UserStatus.ACTIVE)
        return name_kept and email_kept and status_ok
