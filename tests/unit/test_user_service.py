"""Tests for UserService over the in-memory repository."""

import pytest

from userapi.application.dtos.pagination import Pagination
from userapi.application.dtos.user import UserCreate, UserEdit, UserInfo
from userapi.application.services.user_service import UserService
from userapi.domain.enums import UserStatus
from userapi.domain.exceptions import UserAlreadyExistsException
from userapi.domain.outcomes import Accepted, Found, NotFound, Rejected


async def test_create_returns_id_and_persists(user_service: UserService, fake_repo) -> None:
    user_id = await user_service.create(UserCreate(name="Ada", email="ada@example.com"))
    stored = await fake_repo.get_by_id(user_id)
    assert stored is not None
    assert stored.status == UserStatus.ACTIVE


async def test_create_duplicate_email_raises(user_service: UserService, fake_repo) -> None:
    fake_repo.seed("x1", email="ada@example.com")
    with pytest.raises(UserAlreadyExistsException) as exc_info:
        await user_service.create(UserCreate(name="Ada", email="ada@example.com"))
    assert exc_info.value.error_code == "USER_ALREADY_EXISTS"


async def test_get_info_not_found(user_service: UserService) -> None:
    assert await user_service.get_info("missing") == NotFound()


async def test_get_info_found(user_service: UserService, fake_repo) -> None:
    fake_repo.seed("x1", name="Ada")
    outcome = await user_service.get_info("x1")
    assert isinstance(outcome, Found)
    assert isinstance(outcome.value, UserInfo)
    assert outcome.value.name == "Ada"


class TestEdit:
    async def test_unknown_user(self, user_service: UserService) -> None:
        assert await user_service.edit("x1", UserEdit(name="Grace")) == NotFound()

    async def test_locked_user_rejected(self, user_service: UserService, fake_repo) -> None:
        fake_repo.seed("x1", status=UserStatus.LOCKED)
        outcome = await user_service.edit("x1", UserEdit(name="Grace"))
        assert outcome == Found(Rejected({"reason": "locked"}))
        assert (await fake_repo.get_by_id("x1")).name == "Seeded User"

    async def test_duplicate_email_rejected(self, user_service: UserService, fake_repo) -> None:
        fake_repo.seed("x1", email="one@example.com")
        fake_repo.seed("x2", email="two@example.com")
        outcome = await user_service.edit("x1", UserEdit(email="two@example.com"))
        assert outcome == Found(Rejected({"reason": "duplicate_email"}))

    async def test_duplicate_email_found_on_write_is_rejected(
        self, user_service: UserService, fake_repo, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The email is taken between the lookup and the update."""
        fake_repo.seed("x1", email="one@example.com")
        fake_repo.seed("x2", email="two@example.com")

        async def no_match(email: str) -> None:
            return None

        monkeypatch.setattr(fake_repo, "get_by_email", no_match)
        outcome = await user_service.edit("x1", UserEdit(email="two@example.com"))
        assert outcome == Found(Rejected({"reason": "duplicate_email"}))
        assert (await fake_repo.get_by_id("x1")).email == "one@example.com"

    async def test_same_email_is_not_duplicate(self, user_service: UserService, fake_repo) -> None:
        fake_repo.seed("x1", email="one@example.com")
        outcome = await user_service.edit("x1", UserEdit(email="one@example.com", name="Grace"))
        assert isinstance(outcome, Found)
        assert isinstance(outcome.value, Accepted)

    async def test_accepted_returns_updated_info(self, user_service: UserService, fake_repo) -> None:
        fake_repo.seed("x1")
        outcome = await user_service.edit("x1", UserEdit(name="Grace", status=UserStatus.LOCKED))
        assert isinstance(outcome, Found)
        assert isinstance(outcome.value, Accepted)
        info = outcome.value.value
        assert info.name == "Grace"
        assert info.status == UserStatus.LOCKED
        assert (await fake_repo.get_by_id("x1")).status == UserStatus.LOCKED


async def test_delete_is_idempotent(user_service: UserService, fake_repo) -> None:
    fake_repo.seed("x1")
    await user_service.delete("x1")
    await user_service.delete("x1")
    assert await fake_repo.get_by_id("x1") is None


async def test_list_pages_in_creation_order(user_service: UserService, fake_repo) -> None:
    for i in range(5):
        fake_repo.seed(f"x{i}")
    page = await user_service.list(Pagination(page=1, size=2))
    assert [u.id for u in page.items] == ["x2", "x3"]
    assert page.total == 5
    assert page.page == 1
    assert page.size == 2


async def test_list_empty(user_service: UserService) -> None:
    page = await user_service.list(Pagination(page=0, size=20))
    assert page.items == []
    assert page.total == 0
