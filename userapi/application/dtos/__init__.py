"""Application DTOs: validated payloads, read models and pagination."""

from userapi.application.dtos.pagination import Page, Pagination
from userapi.application.dtos.user import UserCreate, UserEdit, UserInfo

__all__ = ["Page", "Pagination", "UserCreate", "UserEdit", "UserInfo"]
