"""Application DTOs (no ORM dependency)."""

from shop_admin.application.dtos.role import RoleResult
from shop_admin.application.dtos.user import AddressResult, UserResult, UserWriteResult
from shop_admin.application.dtos.user_search import ResultPage, UserSearchQuery
from shop_admin.application.dtos.user_views import (
    AddressView,
    BasicUserView,
    DefaultUserView,
    NamedRefView,
)

__all__ = [
    "AddressResult",
    "AddressView",
    "BasicUserView",
    "DefaultUserView",
    "NamedRefView",
    "ResultPage",
    "RoleResult",
    "UserResult",
    "UserSearchQuery",
    "UserWriteResult",
]
