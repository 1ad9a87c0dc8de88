"""User API: bind HTTP to validation, UserService and the outcome router."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, Response

from userapi.api.v1.dependencies import (
    get_pagination,
    get_user_service,
    get_user_service_for_write,
)
from userapi.api.v1.outcome_router import (
    route_create,
    route_delete,
    route_edit,
    route_get,
    route_list,
)
from userapi.application.dtos.pagination import Pagination
from userapi.application.services.user_logic_validator import UserLogicValidator
from userapi.application.services.user_service import UserService
from userapi.domain.outcomes import Invalid, Valid
from userapi.schemas.user import (
    ErrorDetailResponse,
    UserCreatedResponse,
    UserPageResponse,
    UserResponse,
)

router = APIRouter()
error_probe_router = APIRouter()

_BAD_REQUEST = {400: {"model": ErrorDetailResponse, "description": "Invalid payload or rejected by a business rule"}}
_NOT_FOUND = {404: {"description": "User not found"}}


def _collection_uri(request: Request) -> str:
    return str(request.url_for("list_users"))


@router.post(
    "",
    status_code=201,
    response_model=UserCreatedResponse,
    responses={**_BAD_REQUEST, 409: {"description": "Email already registered"}},
)
async def create_user(
    request: Request,
    payload: Annotated[dict[str, Any], Body()],
    service: UserService = Depends(get_user_service_for_write),
) -> Response:
    """Create a user; 201 with its id, or 400 with the first invalid field."""
    match UserLogicValidator.validate_create(payload):
        case Valid(value=create):
            outcome = Valid(await service.create(create))
        case Invalid() as invalid:
            outcome = invalid
    return route_create(outcome, _collection_uri(request))


@router.get("", response_model=UserPageResponse)
async def list_users(
    request: Request,
    pagination: Annotated[Pagination, Depends(get_pagination)],
    service: UserService = Depends(get_user_service),
) -> Response:
    """List users (paginated, ordered by creation time)."""
    page = await service.list(pagination)
    return route_list(page, _collection_uri(request))


@error_probe_router.get("/error", include_in_schema=False)
async def raise_error() -> Response:
    """Always fails; exercises the global 500 handler. Included only when enable_error_probe is set."""
    raise ValueError("Error probe: deliberate unhandled exception")


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def get_user(
    request: Request,
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Get user by id."""
    return route_get(await service.get_info(user_id), _collection_uri(request))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def edit_user(
    request: Request,
    user_id: str,
    payload: Annotated[dict[str, Any], Body()],
    service: UserService = Depends(get_user_service_for_write),
) -> Response:
    """Edit a user: 400 invalid payload, 404 unknown id, 400 rule rejection, 200 updated user."""
    match UserLogicValidator.validate_edit(payload):
        case Valid(value=edit):
            outcome = Valid(await service.edit(user_id, edit))
        case Invalid() as invalid:
            outcome = invalid
    return route_edit(outcome, _collection_uri(request))


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service_for_write),
) -> Response:
    """Delete a user. Always 204, whether or not the user existed."""
    await service.delete(user_id)
    return route_delete()
