"""JSON error bodies for exceptions that escape the user endpoints.

Installed by register_exception_handlers(app). Domain and framework
exceptions become HTTP responses here. Expected failures (validation, lookup,
business rules) never reach these handlers; they are routed as outcome
values by the outcome router.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapi.core.config import get_settings
from userapi.domain.exceptions import UserApiException
from userapi.shared.telemetry import get_trace_id

logger = logging.getLogger(__name__)

# error_code -> status; unknown codes fall back to 400
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "USER_ALREADY_EXISTS": 409,
    "SERVICE_UNAVAILABLE": 503,
}


def _user_api_exception_handler(request: Request, exc: UserApiException) -> JSONResponse:
    """Return JSON from UserApiException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 for malformed requests (unparseable JSON, wrong query types)."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Keep only JSON-safe keys of each error (ctx may hold exception objects)."""
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in exc.errors()
    ]


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and wrong methods keep their status with a JSON body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback and answer 500 (message hidden unless debug)."""
    logger.exception(
        "Unhandled exception on %s %s (trace_id=%s): %s",
        request.method,
        request.url.path,
        get_trace_id() or "-",
        exc,
    )
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the four handlers on app.

    Call once from create_app. Order: UserApiException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(UserApiException, _user_api_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
