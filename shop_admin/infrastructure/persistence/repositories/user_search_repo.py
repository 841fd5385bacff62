"""User search: prefix autocomplete and filtered, paginated listing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from shop_admin.application.dtos.user import UserResult
from shop_admin.domain.value_objects import FilterSpec, SortSpec
from shop_admin.infrastructure.persistence.filters import UserFilterResolver
from shop_admin.infrastructure.persistence.models.address import Address
from shop_admin.infrastructure.persistence.models.user import User
from shop_admin.infrastructure.persistence.repositories.enterprise_repo import (
    member_ids_select,
)
from shop_admin.infrastructure.persistence.repositories.user_repo import (
    user_load_options,
    user_to_result,
)
from shop_admin.shared.utils.sanitization import LIKE_ESCAPE_CHAR, escape_like


def _scope_to_enterprises(
    stmt: Select[Any], enterprise_ids: Sequence[int]
) -> Select[Any]:
    """Restrict to members of any listed enterprise. IN keeps one row per user."""
    if not enterprise_ids:
        return stmt
    return stmt.where(User.id.in_(member_ids_select(enterprise_ids)))


class UserSearchRepository:
    """Read-only user queries backing both search modes."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def autocomplete(
        self, prefix: str, limit: int, enterprise_ids: Sequence[int] = ()
    ) -> list[UserResult]:
        """Users whose email or bill/ship first/last name starts with prefix.

        Case-insensitive, at most limit rows, no ordering guarantee.
        """
        bill = aliased(Address, name="bill_address")
        ship = aliased(Address, name="ship_address")
        pattern = f"{escape_like(prefix)}%"
        columns = (
            User.email,
            bill.firstname,
            bill.lastname,
            ship.firstname,
            ship.lastname,
        )
        matches = or_(*(c.ilike(pattern, escape=LIKE_ESCAPE_CHAR) for c in columns))
        ids = (
            select(User.id)
            .outerjoin(bill, User.bill_address_id == bill.id)
            .outerjoin(ship, User.ship_address_id == ship.id)
            .where(matches)
        )
        ids = _scope_to_enterprises(ids, enterprise_ids)
        stmt = (
            select(User)
            .where(User.id.in_(ids))
            .options(*user_load_options())
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [user_to_result(u) for u in result.scalars().all()]

    async def filtered_page(
        self,
        filters: Sequence[FilterSpec],
        sorts: Sequence[SortSpec],
        enterprise_ids: Sequence[int],
        offset: int,
        limit: int,
    ) -> tuple[list[UserResult], int]:
        """One page of users matching every filter (AND), and the total match count."""
        resolver = UserFilterResolver()

        count_stmt = resolver.filter(select(User.id), filters)
        count_stmt = _scope_to_enterprises(count_stmt, enterprise_ids)
        total = (
            await self.db.execute(select(func.count()).select_from(count_stmt.subquery()))
        ).scalar() or 0

        stmt = resolver.filter(select(User), filters, sorts)
        stmt = _scope_to_enterprises(stmt, enterprise_ids)
        stmt = (
            resolver.order(stmt, sorts)
            .offset(offset)
            .limit(limit)
            .options(*user_load_options())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [user_to_result(u) for u in result.scalars().all()], total
