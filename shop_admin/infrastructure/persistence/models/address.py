"""Address, State, and Country ORM models."""

from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shop_admin.infrastructure.persistence.database import Base
from shop_admin.infrastructure.persistence.models.mixins import (
    IdTimestampModel,
    IntIdMixin,
)


class Country(IntIdMixin, Base):
    """Country. Table: country."""

    __tablename__ = "country"

    name: Mapped[str] = mapped_column(String, nullable=False)
    iso: Mapped[str | None] = mapped_column(String(2), nullable=True)


class State(IntIdMixin, Base):
    """State / province within a country. Table: state."""

    __tablename__ = "state"

    name: Mapped[str] = mapped_column(String, nullable=False)
    abbr: Mapped[str | None] = mapped_column(String, nullable=True)
    country_id: Mapped[int] = mapped_column(
        ForeignKey("country.id", ondelete="CASCADE"), nullable=False, index=True
    )


class Address(IdTimestampModel, Base):
    """Postal address. Table: address. Users reference it as bill or ship address."""

    __tablename__ = "address"

    firstname: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    lastname: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    address1: Mapped[str | None] = mapped_column(String, nullable=True)
    address2: Mapped[str | None] = mapped_column(String, nullable=True)
    city: Mapped[str | None] = mapped_column(String, nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
    alternative_phone: Mapped[str | None] = mapped_column(String, nullable=True)
    company: Mapped[str | None] = mapped_column(String, nullable=True)
    state_id: Mapped[int | None] = mapped_column(
        ForeignKey("state.id", ondelete="SET NULL"), nullable=True
    )
    country_id: Mapped[int | None] = mapped_column(
        ForeignKey("country.id", ondelete="SET NULL"), nullable=True
    )

    state: Mapped[State | None] = relationship(lazy="raise")
    country: Mapped[Country | None] = relationship(lazy="raise")
