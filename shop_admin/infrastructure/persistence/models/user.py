"""User ORM model."""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shop_admin.infrastructure.persistence.database import Base
from shop_admin.infrastructure.persistence.models.address import Address
from shop_admin.infrastructure.persistence.models.mixins import IdTimestampModel
from shop_admin.infrastructure.persistence.models.role import Role


class User(IdTimestampModel, Base):
    """User model. Table: app_user. Email is unique."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    discount: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("0")
    )
    enterprise_limit: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("5")
    )
    show_api_key_view: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    bill_address_id: Mapped[int | None] = mapped_column(
        ForeignKey("address.id", ondelete="SET NULL"), nullable=True
    )
    ship_address_id: Mapped[int | None] = mapped_column(
        ForeignKey("address.id", ondelete="SET NULL"), nullable=True
    )

    bill_address: Mapped[Address | None] = relationship(
        foreign_keys=[bill_address_id], lazy="raise"
    )
    ship_address: Mapped[Address | None] = relationship(
        foreign_keys=[ship_address_id], lazy="raise"
    )
    # Writes go through UserRoleRepository; this side is read-only.
    roles: Mapped[list[Role]] = relationship(
        secondary="user_role", viewonly=True, lazy="raise", order_by=Role.id
    )
