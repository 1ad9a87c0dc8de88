"""User application service: create, read, edit, delete, and list users.

Lookups and business-rule checks come back as outcome values
(LookupOutcome / BusinessOutcome); only unexpected failures raise.
"""

from __future__ import annotations

from userapi.application.dtos.pagination import Page, Pagination
from userapi.application.dtos.user import UserCreate, UserEdit, UserInfo
from userapi.application.interfaces.repositories import IUserRepository
from userapi.domain.enums import UserStatus
from userapi.domain.exceptions import UserAlreadyExistsException
from userapi.domain.outcomes import (
    Accepted,
    BusinessOutcome,
    ErrorDetail,
    Found,
    LookupOutcome,
    NotFound,
    Rejected,
)
from userapi.shared.telemetry import add_span_attributes, get_logger, traced

logger = get_logger(__name__)


class UserService:
    """User use cases over an IUserRepository."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    @traced("user.create")
    async def create(self, payload: UserCreate) -> str:
        """Create an active user and return its id.

        Raises:
            UserAlreadyExistsException: If the email is already registered.
        """
        if await self._user_repo.get_by_email(payload.email) is not None:
            raise UserAlreadyExistsException(payload.email)
        user = await self._user_repo.add(
            name=payload.name, email=payload.email, status=UserStatus.ACTIVE
        )
        logger.info("Created user %s", user.id)
        return user.id

    @traced("user.get_info")
    async def get_info(self, user_id: str) -> LookupOutcome[UserInfo]:
        user = await self._user_repo.get_by_id(user_id)
        add_span_attributes(**{"user.found": user is not None})
        if user is None:
            logger.debug("User %s not found", user_id)
            return NotFound()
        return Found(UserInfo.from_entity(user))

    @traced("user.edit")
    async def edit(
        self, user_id: str, payload: UserEdit
    ) -> LookupOutcome[BusinessOutcome[UserInfo]]:
        """Apply a validated edit.

        Returns NotFound when the user does not exist, Found(Rejected) when a
        business rule (lock, status transition, duplicate email) refuses the
        edit, and Found(Accepted(info)) with the updated read model otherwise.
        """
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            add_span_attributes(**{"user.edit.outcome": "not_found"})
            return NotFound()
        changes = payload.to_changes()
        verdict = user.check_edit(changes)
        if isinstance(verdict, Rejected):
            return self._rejected(user_id, verdict.detail)
        if changes.email is not None and changes.email != user.email:
            other = await self._user_repo.get_by_email(changes.email)
            if other is not None and other.id != user_id:
                return self._rejected(user_id, {"reason": "duplicate_email"})
        try:
            updated = await self._user_repo.update(user.apply(changes))
        except UserAlreadyExistsException:
            # Email claimed by a concurrent write after the check above.
            return self._rejected(user_id, {"reason": "duplicate_email"})
        add_span_attributes(**{"user.edit.outcome": "accepted"})
        logger.info("Edited user %s", user_id)
        return Found(Accepted(UserInfo.from_entity(updated)))

    @staticmethod
    def _rejected(user_id: str, detail: ErrorDetail) -> Found[Rejected]:
        add_span_attributes(**{"user.edit.outcome": "rejected"})
        logger.info("Edit of user %s rejected: %s", user_id, detail)
        return Found(Rejected(detail))

    @traced("user.delete")
    async def delete(self, user_id: str) -> None:
        """Delete the user if present; absence is not an error."""
        removed = await self._user_repo.delete_by_id(user_id)
        add_span_attributes(**{"user.removed": removed})
        logger.info("Delete user %s (removed=%s)", user_id, removed)

    @traced("user.list")
    async def list(self, pagination: Pagination) -> Page[UserInfo]:
        total = await self._user_repo.count()
        users = await self._user_repo.list_page(
            offset=pagination.offset, limit=pagination.size
        )
        add_span_attributes(page=pagination.page, size=pagination.size, total=total)
        return Page(
            items=[UserInfo.from_entity(u) for u in users],
            page=pagination.page,
            size=pagination.size,
            total=total,
        )
