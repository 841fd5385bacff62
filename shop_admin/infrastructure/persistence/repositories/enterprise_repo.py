"""Enterprise membership: the user-id subquery that scopes user searches."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select, select

from shop_admin.infrastructure.persistence.models.enterprise import EnterpriseUser


def member_ids_select(enterprise_ids: Sequence[int]) -> Select[Any]:
    """SELECT user_id of members of any of the enterprises (for use in IN subqueries)."""
    return select(EnterpriseUser.user_id).where(
        EnterpriseUser.enterprise_id.in_(list(enterprise_ids))
    )
