"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from userapi.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from userapi.api.v1.endpoints import health, users
from userapi.core.config import Settings
from userapi.core.constants import USER_ENDPOINT


def build_api_router(settings: Settings) -> APIRouter:
    """Return the v1 router. The error probe is included only when enabled."""
    api_router = APIRouter()
    api_router.include_router(health.router, prefix="/health", tags=["health"])
    if settings.enable_error_probe:
        # Before users.router so /users/error is not captured by /users/{user_id}.
        api_router.include_router(
            users.error_probe_router, prefix=USER_ENDPOINT, tags=["diagnostics"]
        )
    api_router.include_router(users.router, prefix=USER_ENDPOINT, tags=["users"])
    return api_router
