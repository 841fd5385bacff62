"""Order ORM model (only what user deletion needs to know)."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from shop_admin.infrastructure.persistence.database import Base
from shop_admin.infrastructure.persistence.models.mixins import IdTimestampModel


class Order(IdTimestampModel, Base):
    """Customer order. Table: orders. RESTRICT keeps users with orders from being deleted."""

    __tablename__ = "orders"

    number: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("app_user.id", ondelete="RESTRICT"), nullable=True, index=True
    )
