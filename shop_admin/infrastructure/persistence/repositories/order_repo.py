"""Order lookups used when deleting users."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shop_admin.infrastructure.persistence.models.order import Order


class OrderRepository:
    """Read-only order counts."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def count_for_user(self, user_id: int) -> int:
        """Return the number of orders owned by the user."""
        result = await self.db.execute(
            select(func.count(Order.id)).where(Order.user_id == user_id)
        )
        return result.scalar() or 0
