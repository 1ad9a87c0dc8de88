"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, TimestampMixin.
"""

from datetime import UTC, datetime

from cuid2 import cuid_wrapper
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

generate_cuid = cuid_wrapper()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CuidMixin:
    """Mixin for models using CUID2 as primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(32), primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware, set client-side)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=_utcnow,
            onupdate=_utcnow,
            nullable=False,
        )
