"""Application ports: repository and service protocols."""

from shop_admin.application.interfaces.repositories import (
    IOrderRepository,
    IRoleRepository,
    IUserRepository,
    IUserRoleRepository,
    IUserSearchRepository,
)
from shop_admin.application.interfaces.services import INotificationSender

__all__ = [
    "INotificationSender",
    "IOrderRepository",
    "IRoleRepository",
    "IUserRepository",
    "IUserRoleRepository",
    "IUserSearchRepository",
]
