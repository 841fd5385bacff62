"""Tests for UserFilterResolver SQL generation (compiled, no database)."""

from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from shop_admin.domain.enums import FilterField, FilterOperator, SortDirection
from shop_admin.domain.value_objects import FilterSpec, SortSpec
from shop_admin.infrastructure.persistence.filters import UserFilterResolver
from shop_admin.infrastructure.persistence.models import User


def _sql(stmt) -> str:
    return str(
        stmt.compile(
            dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
        )
    )


def test_contains_filter_escapes_wildcards() -> None:
    resolver = UserFilterResolver()
    stmt = resolver.filter(
        select(User.id),
        [FilterSpec(FilterField.EMAIL, FilterOperator.CONT, "50%_off")],
    )
    compiled = stmt.compile(dialect=postgresql.dialect())
    sql = str(compiled)
    assert "ILIKE" in sql
    assert "ESCAPE" in sql
    assert "JOIN" not in sql
    assert "%50\\%\\_off%" in compiled.params.values()


def test_address_filter_adds_only_needed_join() -> None:
    resolver = UserFilterResolver()
    stmt = resolver.filter(
        select(User.id),
        [FilterSpec(FilterField.BILL_ADDRESS_FIRSTNAME, FilterOperator.START, "Ja")],
    )
    sql = _sql(stmt)
    assert "LEFT OUTER JOIN address AS bill_address" in sql
    assert "ship_address" not in sql


def test_filters_are_anded() -> None:
    resolver = UserFilterResolver()
    stmt = resolver.filter(
        select(User.id),
        [
            FilterSpec(FilterField.DISCOUNT, FilterOperator.GTEQ, 10),
            FilterSpec(FilterField.ID, FilterOperator.IN, (1, 2)),
            FilterSpec(FilterField.EMAIL, FilterOperator.NULL, False),
        ],
    )
    sql = _sql(stmt)
    assert "app_user.discount >= 10" in sql
    assert "app_user.id IN (1, 2)" in sql
    assert "app_user.email IS NOT NULL" in sql
    assert sql.count(" AND ") == 2


def test_order_appends_id_tiebreaker() -> None:
    resolver = UserFilterResolver()
    sorts = [SortSpec(FilterField.SHIP_ADDRESS_LASTNAME, SortDirection.DESC)]
    stmt = resolver.order(resolver.filter(select(User.id), [], sorts), sorts)
    sql = _sql(stmt)
    assert "LEFT OUTER JOIN address AS ship_address" in sql
    assert sql.rstrip().endswith("ORDER BY ship_address.lastname DESC, app_user.id ASC")
