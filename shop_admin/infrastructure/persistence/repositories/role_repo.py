"""Role repository. Returns application DTOs (RoleResult)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shop_admin.application.dtos.role import RoleResult
from shop_admin.infrastructure.persistence.models.role import Role
from shop_admin.infrastructure.persistence.repositories.base import BaseRepository


def _role_to_result(r: Role) -> RoleResult:
    return RoleResult(id=r.id, name=r.name)


class RoleRepository(BaseRepository[Role]):
    """Role lookup by id and the distinct-by-name listing used by the roles picker."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Role)

    async def get_by_id(self, role_id: int) -> RoleResult | None:
        orm = await super().get_by_id(role_id)
        return _role_to_result(orm) if orm else None

    async def list_distinct_by_name(self) -> list[RoleResult]:
        """One role per name (lowest id wins), ordered by name.

        Uses PostgreSQL DISTINCT ON (name).
        """
        result = await self.db.execute(
            select(Role).distinct(Role.name).order_by(Role.name, Role.id)
        )
        return [_role_to_result(r) for r in result.scalars().all()]
