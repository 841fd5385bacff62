"""User-role link repository: read and replace a user's role set."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shop_admin.infrastructure.persistence.models.role import UserRole
from shop_admin.shared.telemetry import get_logger

logger = get_logger(__name__)


class UserRoleRepository:
    """Rows of user_role for one user at a time."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_role_ids(self, user_id: int) -> list[int]:
        result = await self.db.execute(
            select(UserRole.role_id)
            .where(UserRole.user_id == user_id)
            .order_by(UserRole.role_id)
        )
        return list(result.scalars().all())

    async def replace_user_roles(self, user_id: int, role_ids: Sequence[int]) -> None:
        """Replace the user's whole role set with role_ids.

        Deletes every existing link, then inserts one row per distinct id.
        Runs inside the caller's transaction; nothing is committed here.
        """
        await self.db.execute(delete(UserRole).where(UserRole.user_id == user_id))
        unique_ids = list(dict.fromkeys(role_ids))
        self.db.add_all(UserRole(user_id=user_id, role_id=rid) for rid in unique_ids)
        await self.db.flush()
        logger.debug("User %s roles replaced with %s", user_id, unique_ids)
