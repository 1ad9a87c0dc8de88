"""API v1: endpoints, dependencies, and outcome routing."""

from userapi.api.v1.router import build_api_router

__all__ = ["build_api_router"]
