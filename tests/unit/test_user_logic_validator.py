"""Tests for UserLogicValidator (payload -> ValidationOutcome)."""

import pytest

from userapi.application.dtos.user import UserCreate, UserEdit
from userapi.application.services.user_logic_validator import UserLogicValidator
from userapi.domain.enums import UserStatus
from userapi.domain.outcomes import Invalid, Valid


class TestValidateCreate:
    def test_valid_payload(self) -> None:
        outcome = UserLogicValidator.validate_create({"name": " Ada ", "email": "Ada@Example.com"})
        assert outcome == Valid(UserCreate(name="Ada", email="ada@example.com"))

    def test_name_too_short_reported_first(self) -> None:
        outcome = UserLogicValidator.validate_create({"name": "a"})
        assert outcome == Invalid({"field": "name", "reason": "too_short"})

    def test_name_too_long(self) -> None:
        outcome = UserLogicValidator.validate_create({"name": "x" * 65, "email": "a@b.co"})
        assert outcome == Invalid({"field": "name", "reason": "too_long"})

    def test_missing_name(self) -> None:
        outcome = UserLogicValidator.validate_create({"email": "a@b.co"})
        assert outcome == Invalid({"field": "name", "reason": "required"})

    def test_missing_email(self) -> None:
        outcome = UserLogicValidator.validate_create({"name": "Ada"})
        assert outcome == Invalid({"field": "email", "reason": "required"})

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.de", "@x.io"])
    def test_bad_email_format(self, email: str) -> None:
        outcome = UserLogicValidator.validate_create({"name": "Ada", "email": email})
        assert outcome == Invalid({"field": "email", "reason": "invalid_format"})

    def test_wrong_type(self) -> None:
        outcome = UserLogicValidator.validate_create({"name": 42, "email": "a@b.co"})
        assert outcome == Invalid({"field": "name", "reason": "invalid_value"})

    def test_unknown_fields_ignored(self) -> None:
        outcome = UserLogicValidator.validate_create(
            {"name": "Ada", "email": "a@b.co", "role": "admin"}
        )
        assert isinstance(outcome, Valid)


class TestValidateEdit:
    def test_partial_edit(self) -> None:
        outcome = UserLogicValidator.validate_edit({"status": "locked"})
        assert outcome == Valid(UserEdit(status=UserStatus.LOCKED))

    def test_email_lowercased(self) -> None:
        outcome = UserLogicValidator.validate_edit({"email": "NEW@Example.com"})
        assert outcome == Valid(UserEdit(email="new@example.com"))

    def test_empty_edit(self) -> None:
        assert UserLogicValidator.validate_edit({}) == Invalid(
            {"field": None, "reason": "empty_edit"}
        )

    def test_only_unknown_or_null_fields_is_empty(self) -> None:
        assert UserLogicValidator.validate_edit({"name": None, "nickname": "x"}) == Invalid(
            {"field": None, "reason": "empty_edit"}
        )

    def test_bad_status(self) -> None:
        outcome = UserLogicValidator.validate_edit({"status": "banned"})
        assert outcome == Invalid({"field": "status", "reason": "invalid_value"})

    def test_name_too_short(self) -> None:
        outcome = UserLogicValidator.validate_edit({"name": " b "})
        assert outcome == Invalid({"field": "name", "reason": "too_short"})
