"""Role and UserRole ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from shop_admin.infrastructure.persistence.database import Base
from shop_admin.infrastructure.persistence.models.mixins import (
    IdTimestampModel,
    IntIdMixin,
)


class Role(IdTimestampModel, Base):
    """Role. Table: role. Names are not unique (listing is distinct by name)."""

    __tablename__ = "role"

    name: Mapped[str] = mapped_column(String, nullable=False, index=True)


class UserRole(IntIdMixin, Base):
    """Many-to-many user-role. Table: user_role."""

    __tablename__ = "user_role"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    role_id: Mapped[int] = mapped_column(
        ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "role_id", name="uq_user_role"),
        Index("ix_user_role_user_id", "user_id"),
    )
