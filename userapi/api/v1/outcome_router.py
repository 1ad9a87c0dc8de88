"""Outcome router: map outcome unions to HTTP responses.

Pure functions. Each route_* takes the outcome produced by validation and
the application service and returns the response to send; nothing here
performs I/O or mutates its input. Success payloads get hypermedia links
attached by attach_links, which builds a new response model.

Decision table:

    create  Invalid(d)                      -> 400 d
            Valid(id)                       -> 201 {"id": id}
    get     NotFound                        -> 404
            Found(info)                     -> 200 info + {self, edit, delete}
    edit    Invalid(d)                      -> 400 d
            Valid(NotFound)                 -> 404
            Valid(Found(Rejected(d)))       -> 400 d
            Valid(Found(Accepted(info)))    -> 200 info + {self, info, delete}
    delete  (always)                        -> 204
    list    Page(items)                     -> 200 items + {self, edit, delete}, page metadata
"""

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlencode

from fastapi import Response, status
from fastapi.responses import JSONResponse

from userapi.application.dtos.pagination import Page
from userapi.application.dtos.user import UserInfo
from userapi.core.constants import (
    DELETE_REL,
    EDIT_REL,
    EDITED_RELS,
    NEXT_REL,
    PREV_REL,
    READ_RELS,
    SELF_REL,
)
from userapi.domain.outcomes import (
    EditAccepted,
    EditNotFound,
    EditRejected,
    EditResult,
    ErrorDetail,
    Found,
    Invalid,
    InvalidInput,
    LookupOutcome,
    NotFound,
    Valid,
    ValidationOutcome,
    flatten_edit_result,
)
from userapi.schemas.user import (
    LinkSchema,
    PageMetadata,
    UserPageResponse,
    UserResponse,
)

# Every relation targets the item URI; the method says what the relation does.
_REL_METHODS: dict[str, str] = {EDIT_REL: "PUT", DELETE_REL: "DELETE"}


def item_uri(collection_uri: str, user_id: str) -> str:
    return f"{collection_uri.rstrip('/')}/{user_id}"


def attach_links(
    info: UserInfo, rels: Iterable[str], collection_uri: str
) -> UserResponse:
    """Return a response model for info carrying one link per relation.

    Links are derived from info.id only; info itself is not modified.
    """
    href = item_uri(collection_uri, info.id)
    response = UserResponse.model_validate(info)
    return response.model_copy(
        update={
            "links": [
                LinkSchema(rel=rel, href=href, method=_REL_METHODS.get(rel, "GET"))
                for rel in rels
            ]
        }
    )


def _json(status_code: int, model: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=model.model_dump(mode="json"))


def _bad_request(detail: ErrorDetail) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=detail)


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def route_create(outcome: ValidationOutcome[str], collection_uri: str) -> Response:
    """400 with the validation detail, or 201 with the new id and a Location header."""
    match outcome:
        case Invalid(detail=detail):
            return _bad_request(detail)
        case Valid(value=user_id):
            return JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content={"id": user_id},
                headers={"Location": item_uri(collection_uri, user_id)},
            )
    raise TypeError(f"Not a create outcome: {outcome!r}")


def route_get(outcome: LookupOutcome[UserInfo], collection_uri: str) -> Response:
    """404 with an empty body, or 200 with the user and its read links."""
    match outcome:
        case NotFound():
            return _not_found()
        case Found(value=info):
            return _json(status.HTTP_200_OK, attach_links(info, READ_RELS, collection_uri))
    raise TypeError(f"Not a lookup outcome: {outcome!r}")


def route_edit(outcome: EditResult[UserInfo], collection_uri: str) -> Response:
    """Flatten the nested edit result and map each of its four arms."""
    match flatten_edit_result(outcome):
        case InvalidInput(detail=detail):
            return _bad_request(detail)
        case EditNotFound():
            return _not_found()
        case EditRejected(detail=detail):
            return _bad_request(detail)
        case EditAccepted(value=info):
            return _json(
                status.HTTP_200_OK, attach_links(info, EDITED_RELS, collection_uri)
            )
    raise TypeError(f"Not an edit result: {outcome!r}")


def route_delete() -> Response:
    """Always 204: deleting an absent user is not distinguished from success."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _page_uri(collection_uri: str, page: int, size: int) -> str:
    return f"{collection_uri}?{urlencode({'page': page, 'size': size})}"


def route_list(page: Page[UserInfo], collection_uri: str) -> Response:
    """200 with linked items, page metadata and self/next/prev navigation links."""
    nav = [LinkSchema(rel=SELF_REL, href=_page_uri(collection_uri, page.page, page.size))]
    if page.has_next:
        nav.append(
            LinkSchema(rel=NEXT_REL, href=_page_uri(collection_uri, page.page + 1, page.size))
        )
    if page.has_prev:
        nav.append(
            LinkSchema(rel=PREV_REL, href=_page_uri(collection_uri, page.page - 1, page.size))
        )
    body = UserPageResponse(
        items=[attach_links(info, READ_RELS, collection_uri) for info in page.items],
        page=PageMetadata(
            number=page.page,
            size=page.size,
            total_elements=page.total,
            total_pages=page.total_pages,
        ),
        links=nav,
    )
    return _json(status.HTTP_200_OK, body)
