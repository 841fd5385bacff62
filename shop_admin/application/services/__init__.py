"""Application services: user search/projection and user writes."""

from shop_admin.application.services.filter_parser import parse_filter_bag
from shop_admin.application.services.user_query_service import UserQueryService
from shop_admin.application.services.user_service import UserService

__all__ = ["UserQueryService", "UserService", "parse_filter_bag"]
