"""Enterprise and EnterpriseUser (membership) ORM models."""

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from shop_admin.infrastructure.persistence.database import Base
from shop_admin.infrastructure.persistence.models.mixins import IdTimestampModel


class Enterprise(IdTimestampModel, Base):
    """Enterprise (shop/producer) users can manage. Table: enterprise."""

    __tablename__ = "enterprise"

    name: Mapped[str] = mapped_column(String, nullable=False)


class EnterpriseUser(Base):
    """Membership link. Table: enterprise_user. Primary key (enterprise_id, user_id)."""

    __tablename__ = "enterprise_user"

    enterprise_id: Mapped[int] = mapped_column(
        ForeignKey("enterprise.id", ondelete="CASCADE"), primary_key=True
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True
    )

    __table_args__ = (Index("ix_enterprise_user_user_id", "user_id"),)
