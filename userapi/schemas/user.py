"""User API schemas (response shapes; request payloads are validated by UserLogicValidator)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from userapi.domain.enums import UserStatus


class LinkSchema(BaseModel):
    """Hypermedia relation: rel name, target URI and the HTTP method to use."""

    rel: str
    href: str
    method: str = "GET"


class UserCreatedResponse(BaseModel):
    """Response for POST /users."""

    id: str


class UserResponse(BaseModel):
    """User read-model with hypermedia links."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    status: UserStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None
    links: list[LinkSchema] = Field(default_factory=list)


class PageMetadata(BaseModel):
    """Pagination metadata of a list response."""

    number: int
    size: int
    total_elements: int
    total_pages: int


class UserPageResponse(BaseModel):
    """Response for GET /users."""

    items: list[UserResponse]
    page: PageMetadata
    links: list[LinkSchema] = Field(default_factory=list)


class ErrorDetailResponse(BaseModel):
    """400 body for validation or business-rule failures."""

    model_config = ConfigDict(extra="allow")

    field: str | None = None
    reason: str
