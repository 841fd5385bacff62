"""Translate typed FilterSpec / SortSpec values into SQLAlchemy clauses on User.

Only FilterField members have a column mapping, so nothing outside the
allowlist can reach SQL. Address fields resolve against aliased bill/ship
address joins, added to the statement only when a filter or sort needs them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import aliased
from sqlalchemy.sql.elements import ColumnElement

from shop_admin.domain.enums import FilterField, FilterOperator, SortDirection
from shop_admin.domain.value_objects import FilterSpec, SortSpec
from shop_admin.infrastructure.persistence.models.address import Address
from shop_admin.infrastructure.persistence.models.user import User
from shop_admin.shared.utils.sanitization import LIKE_ESCAPE_CHAR, escape_like

_BILL_FIELDS = frozenset({
    FilterField.BILL_ADDRESS_FIRSTNAME,
    FilterField.BILL_ADDRESS_LASTNAME,
})
_SHIP_FIELDS = frozenset({
    FilterField.SHIP_ADDRESS_FIRSTNAME,
    FilterField.SHIP_ADDRESS_LASTNAME,
})


class UserFilterResolver:
    """Build WHERE / ORDER BY clauses for a user query from typed specs."""

    def __init__(self) -> None:
        self.bill = aliased(Address, name="bill_address")
        self.ship = aliased(Address, name="ship_address")

    def column_for(self, field: FilterField) -> ColumnElement[Any]:
        columns: dict[FilterField, Any] = {
            FilterField.ID: User.id,
            FilterField.EMAIL: User.email,
            FilterField.DISCOUNT: User.discount,
            FilterField.ENTERPRISE_LIMIT: User.enterprise_limit,
            FilterField.CREATED_AT: User.created_at,
            FilterField.UPDATED_AT: User.updated_at,
            FilterField.BILL_ADDRESS_FIRSTNAME: self.bill.firstname,
            FilterField.BILL_ADDRESS_LASTNAME: self.bill.lastname,
            FilterField.SHIP_ADDRESS_FIRSTNAME: self.ship.firstname,
            FilterField.SHIP_ADDRESS_LASTNAME: self.ship.lastname,
        }
        return columns[field]

    def predicate(self, spec: FilterSpec) -> ColumnElement[bool]:
        col = self.column_for(spec.field)
        op = spec.operator
        value = spec.value
        if op is FilterOperator.EQ:
            return col == value
        if op is FilterOperator.NOT_EQ:
            return col != value
        if op is FilterOperator.CONT:
            return col.ilike(f"%{escape_like(value)}%", escape=LIKE_ESCAPE_CHAR)
        if op is FilterOperator.START:
            return col.ilike(f"{escape_like(value)}%", escape=LIKE_ESCAPE_CHAR)
        if op is FilterOperator.END:
            return col.ilike(f"%{escape_like(value)}", escape=LIKE_ESCAPE_CHAR)
        if op is FilterOperator.LT:
            return col < value
        if op is FilterOperator.LTEQ:
            return col <= value
        if op is FilterOperator.GT:
            return col > value
        if op is FilterOperator.GTEQ:
            return col >= value
        if op is FilterOperator.IN:
            return col.in_(value)
        if op is FilterOperator.NULL:
            return col.is_(None) if value else col.is_not(None)
        raise ValueError(f"Unsupported operator: {op}")

    def filter(
        self,
        stmt: Select[Any],
        filters: Sequence[FilterSpec],
        sorts: Sequence[SortSpec] = (),
    ) -> Select[Any]:
        """Add the address joins filters/sorts need and WHERE (AND of all filters)."""
        fields = {f.field for f in filters} | {s.field for s in sorts}
        if fields & _BILL_FIELDS:
            stmt = stmt.outerjoin(self.bill, User.bill_address_id == self.bill.id)
        if fields & _SHIP_FIELDS:
            stmt = stmt.outerjoin(self.ship, User.ship_address_id == self.ship.id)
        if filters:
            stmt = stmt.where(*(self.predicate(f) for f in filters))
        return stmt

    def order(self, stmt: Select[Any], sorts: Sequence[SortSpec]) -> Select[Any]:
        """ORDER BY the requested sorts, then id so pages are stable."""
        order_by = [
            self.column_for(s.field).desc()
            if s.direction is SortDirection.DESC
            else self.column_for(s.field).asc()
            for s in sorts
        ]
        return stmt.order_by(*order_by, User.id.asc())
