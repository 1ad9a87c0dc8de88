"""Tests for UserEntity invariants and edit rules."""

import pytest

from userapi.domain.entities import UserChanges, UserEntity
from userapi.domain.enums import UserStatus
from userapi.domain.exceptions import ValidationException
from userapi.domain.outcomes import Accepted, Rejected


def _user(status: UserStatus = UserStatus.ACTIVE) -> UserEntity:
    return UserEntity(id="x1", name="Ada", email="ada@example.com", status=status)


class TestInvariants:
    def test_requires_id(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            UserEntity(id="", name="Ada", email="ada@example.com")
        assert exc_info.value.details == {"field": "id"}

    def test_requires_non_blank_name(self) -> None:
        with pytest.raises(ValidationException):
            UserEntity(id="x1", name="   ", email="ada@example.com")


class TestTransitions:
    @pytest.mark.parametrize(
        ("source", "target", "allowed"),
        [
            (UserStatus.ACTIVE, UserStatus.LOCKED, True),
            (UserStatus.ACTIVE, UserStatus.DISABLED, True),
            (UserStatus.LOCKED, UserStatus.ACTIVE, True),
            (UserStatus.LOCKED, UserStatus.DISABLED, True),
            (UserStatus.DISABLED, UserStatus.ACTIVE, False),
            (UserStatus.DISABLED, UserStatus.LOCKED, False),
            (UserStatus.DISABLED, UserStatus.DISABLED, True),
        ],
    )
    def test_can_transition_to(
        self, source: UserStatus, target: UserStatus, allowed: bool
    ) -> None:
        assert _user(source).can_transition_to(target) is allowed


class TestCheckEdit:
    def test_active_user_accepts_profile_change(self) -> None:
        changes = UserChanges(name="Grace")
        assert _user().check_edit(changes) == Accepted(changes)

    def test_locked_user_rejects_profile_change(self) -> None:
        outcome = _user(UserStatus.LOCKED).check_edit(UserChanges(name="Grace"))
        assert outcome == Rejected({"reason": "locked"})

    def test_locked_user_accepts_pure_unlock(self) -> None:
        changes = UserChanges(status=UserStatus.ACTIVE)
        assert _user(UserStatus.LOCKED).check_edit(changes) == Accepted(changes)

    @pytest.mark.parametrize(
        "changes",
        [
            UserChanges(status=UserStatus.LOCKED),
            UserChanges(name="Ada"),
            UserChanges(name="Ada", email="ada@example.com", status=UserStatus.LOCKED),
            UserChanges(email="ada@example.com", status=UserStatus.ACTIVE),
        ],
    )
    def test_locked_user_accepts_noop_edit(self, changes: UserChanges) -> None:
        assert _user(UserStatus.LOCKED).check_edit(changes) == Accepted(changes)

    def test_locked_user_rejects_disable(self) -> None:
        outcome = _user(UserStatus.LOCKED).check_edit(UserChanges(status=UserStatus.DISABLED))
        assert outcome == Rejected({"reason": "locked"})

    def test_locked_user_rejects_unlock_with_rename(self) -> None:
        outcome = _user(UserStatus.LOCKED).check_edit(
            UserChanges(name="Grace", status=UserStatus.ACTIVE)
        )
        assert outcome == Rejected({"reason": "locked"})

    def test_disabled_user_cannot_be_reactivated(self) -> None:
        outcome = _user(UserStatus.DISABLED).check_edit(
            UserChanges(status=UserStatus.ACTIVE)
        )
        assert outcome == Rejected(
            {"reason": "illegal_transition", "from": "disabled", "to": "active"}
        )

    def test_check_edit_does_not_mutate(self) -> None:
        user = _user()
        user.check_edit(UserChanges(name="Grace", status=UserStatus.LOCKED))
        assert user.name == "Ada"
        assert user.status == UserStatus.ACTIVE


class TestApply:
    def test_apply_returns_copy_with_changes(self) -> None:
        user = _user()
        updated = user.apply(UserChanges(email="new@example.com", status=UserStatus.LOCKED))
        assert updated.email == "new@example.com"
        assert updated.status == UserStatus.LOCKED
        assert updated.name == "Ada"
        assert user.email == "ada@example.com"
