"""Pagination request and page result DTOs."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pagination:
    """Zero-based page request. Build with Pagination.clamped for raw query input."""

    page: int = 0
    size: int = 20

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def clamped(
        cls,
        page: int | None,
        size: int | None,
        *,
        default_size: int,
        max_size: int,
    ) -> "Pagination":
        """Normalize raw query values: negative page -> 0, size < 1 -> default, size > max -> max."""
        page = page if page is not None and page > 0 else 0
        if size is None or size < 1:
            size = default_size
        return cls(page=page, size=min(size, max_size))


@dataclass(frozen=True)
class Page[T]:
    """One page of items plus the metadata needed to navigate."""

    items: list[T] = field(default_factory=list)
    page: int = 0
    size: int = 20
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 0
