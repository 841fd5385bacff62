"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain value objects only; no
infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from shop_admin.application.dtos.role import RoleResult
    from shop_admin.application.dtos.user import UserResult
    from shop_admin.domain.value_objects import FilterSpec, SortSpec


class IUserRepository(Protocol):
    """Protocol for user persistence (create, read, update, delete)."""

    async def get_by_id(self, user_id: int) -> UserResult | None:
        """Return user with addresses and role ids, or None."""

    async def create_user(self, attrs: Mapping[str, Any]) -> UserResult:
        """Insert a user from permitted attributes. Raises DuplicateEmailException."""

    async def update_user(
        self, user_id: int, changes: Mapping[str, Any]
    ) -> UserResult | None:
        """Apply permitted attribute changes; None when the user does not exist."""

    async def delete_user(self, user_id: int) -> bool:
        """Delete user; False when it does not exist."""


class IUserSearchRepository(Protocol):
    """Protocol for the two user search modes."""

    async def autocomplete(
        self, prefix: str, limit: int, enterprise_ids: Sequence[int] = ()
    ) -> list[UserResult]:
        """Users whose email or bill/ship first/last name starts with prefix (case-insensitive)."""

    async def filtered_page(
        self,
        filters: Sequence[FilterSpec],
        sorts: Sequence[SortSpec],
        enterprise_ids: Sequence[int],
        offset: int,
        limit: int,
    ) -> tuple[list[UserResult], int]:
        """One page of users matching every filter, plus the total match count."""


class IRoleRepository(Protocol):
    """Protocol for role lookup (RoleStore)."""

    async def get_by_id(self, role_id: int) -> RoleResult | None:
        """Return role by id, or None when it does not exist."""

    async def list_distinct_by_name(self) -> list[RoleResult]:
        """One role per distinct name (lowest id), ordered by name."""


class IUserRoleRepository(Protocol):
    """Protocol for the user-role link table."""

    async def get_role_ids(self, user_id: int) -> list[int]:
        """Return role ids assigned to the user."""

    async def replace_user_roles(self, user_id: int, role_ids: Sequence[int]) -> None:
        """Replace the user's whole role set with role_ids (not additive)."""


class IOrderRepository(Protocol):
    """Protocol for order lookups needed by user deletion."""

    async def count_for_user(self, user_id: int) -> int:
        """Return the number of orders owned by the user."""
