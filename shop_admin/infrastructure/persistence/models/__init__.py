"""Persistence models: ORM entities and mixins."""

from shop_admin.infrastructure.persistence.models.address import Address, Country, State
from shop_admin.infrastructure.persistence.models.enterprise import (
    Enterprise,
    EnterpriseUser,
)
from shop_admin.infrastructure.persistence.models.mixins import (
    IdTimestampModel,
    IntIdMixin,
    TimestampMixin,
)
from shop_admin.infrastructure.persistence.models.order import Order
from shop_admin.infrastructure.persistence.models.role import Role, UserRole
from shop_admin.infrastructure.persistence.models.user import User

__all__ = [
    "Address",
    "Country",
    "Enterprise",
    "EnterpriseUser",
    "IdTimestampModel",
    "IntIdMixin",
    "Order",
    "Role",
    "State",
    "TimestampMixin",
    "User",
    "UserRole",
]
