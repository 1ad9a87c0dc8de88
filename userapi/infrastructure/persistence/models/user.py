"""User ORM model."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from userapi.domain.enums import UserStatus
from userapi.infrastructure.persistence.database import Base
from userapi.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class UserModel(CuidMixin, TimestampMixin, Base):
    """User model. Table: app_user. Email is unique; status is one of UserStatus."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=UserStatus.ACTIVE.value
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ({})".format(", ".join(f"'{v}'" for v in UserStatus.values())),
            name="app_user_status_check",
        ),
    )
