"""Repositories: SQLAlchemy implementations of the application repository protocols."""

from shop_admin.infrastructure.persistence.repositories.base import BaseRepository
from shop_admin.infrastructure.persistence.repositories.enterprise_repo import (
    member_ids_select,
)
from shop_admin.infrastructure.persistence.repositories.order_repo import OrderRepository
from shop_admin.infrastructure.persistence.repositories.role_repo import RoleRepository
from shop_admin.infrastructure.persistence.repositories.user_repo import UserRepository
from shop_admin.infrastructure.persistence.repositories.user_role_repo import (
    UserRoleRepository,
)
from shop_admin.infrastructure.persistence.repositories.user_search_repo import (
    UserSearchRepository,
)

__all__ = [
    "BaseRepository",
    "OrderRepository",
    "RoleRepository",
    "UserRepository",
    "UserRoleRepository",
    "UserSearchRepository",
    "member_ids_select",
]
