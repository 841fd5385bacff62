"""Domain layer: exceptions and search value types.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from shop_admin.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    RoleNotFoundException,
    ShopAdminException,
    SqlNotConfiguredException,
    UserHasOrdersException,
    ValidationException,
)

__all__ = [
    "DuplicateEmailException",
    "ResourceNotFoundException",
    "RoleNotFoundException",
    "ShopAdminException",
    "SqlNotConfiguredException",
    "UserHasOrdersException",
    "ValidationException",
]
