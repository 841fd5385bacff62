"""Tests for UserQueryService: mode selection, defaults, enterprise scoping, projection."""

from collections.abc import Sequence
from typing import Any

import pytest

from shop_admin.application.dtos.user import UserResult
from shop_admin.application.services.user_query_service import UserQueryService
from shop_admin.domain.enums import FilterField, FilterOperator, JsonShape
from shop_admin.domain.exceptions import ValidationException
from shop_admin.domain.value_objects import FilterSpec
from shop_admin.shared.utils.parsing import INT4_MAX


def _user(user_id: int, email: str) -> UserResult:
    return UserResult(
        id=user_id,
        email=email,
        discount=0,
        enterprise_limit=5,
        show_api_key_view=False,
    )


class FakeSearchRepo:
    """Records calls; returns canned rows."""

    def __init__(self, rows: list[UserResult] | None = None, total: int | None = None):
        self.rows = rows or []
        self.total = len(self.rows) if total is None else total
        self.autocomplete_calls: list[tuple[Any, ...]] = []
        self.page_calls: list[tuple[Any, ...]] = []

    async def autocomplete(
        self, prefix: str, limit: int, enterprise_ids: Sequence[int] = ()
    ) -> list[UserResult]:
        self.autocomplete_calls.append((prefix, limit, tuple(enterprise_ids)))
        return self.rows[:limit]

    async def filtered_page(self, filters, sorts, enterprise_ids, offset, limit):
        self.page_calls.append((filters, sorts, tuple(enterprise_ids), offset, limit))
        return self.rows[offset : offset + limit], self.total


@pytest.fixture
def service() -> UserQueryService:
    return UserQueryService(FakeSearchRepo())


def test_interactive_string_q_is_autocomplete(service) -> None:
    query = service.build_query({"q": "  jane "}, interactive=True)
    assert query.autocomplete is True
    assert query.prefix == "jane"
    assert query.limit == 100


def test_non_interactive_string_q_is_general_without_filters(service) -> None:
    query = service.build_query({"q": "jane"})
    assert query.autocomplete is False
    assert query.filters == ()


@pytest.mark.parametrize("q", [None, "", "   "])
def test_interactive_blank_q_is_general(service, q) -> None:
    assert service.build_query({"q": q}, interactive=True).autocomplete is False


def test_interactive_filter_bag_is_general(service) -> None:
    query = service.build_query({"q": {"email_cont": "x"}}, interactive=True)
    assert query.autocomplete is False
    assert query.filters == (FilterSpec(FilterField.EMAIL, FilterOperator.CONT, "x"),)


def test_limit_and_per_page_defaults_and_fallbacks(service) -> None:
    assert service.build_query({"q": "a", "limit": "abc"}, interactive=True).limit == 100
    assert service.build_query({"q": "a", "limit": "5"}, interactive=True).limit == 5
    general = service.build_query({"page": "x", "per_page": "-1"})
    assert (general.page, general.per_page) == (1, 15)
    assert service.build_query({"per_page": "50000"}).per_page == 1000


def test_enterprise_ids_merge_top_level_and_bag(service) -> None:
    query = service.build_query(
        {"enterprise_id_in": ["1", ""], "q": {"enterprise_id_in": ["2", "1"]}}
    )
    assert query.enterprise_ids == (1, 2)
    auto = service.build_query({"q": "j", "enterprise_id_in": "4,5"}, interactive=True)
    assert auto.enterprise_ids == (4, 5)


@pytest.mark.parametrize(
    "params",
    [
        {"enterprise_id_in": ["abc"]},
        {"q": {"enterprise_id_in": ["x1"]}},
        {"enterprise_id_in": ["3", "x"]},
        {"enterprise_id_in": [str(INT4_MAX + 1)]},
        {"q": "jan", "enterprise_id_in": "0"},
    ],
)
def test_malformed_enterprise_scope_is_rejected(service, params) -> None:
    """A supplied scope never degrades to an unscoped search."""
    with pytest.raises(ValidationException) as exc_info:
        service.build_query(params, interactive=True)
    assert exc_info.value.error_code == "VALIDATION_ERROR"
    assert exc_info.value.details == {"field": "enterprise_id_in"}


async def test_malformed_enterprise_scope_never_reaches_repository() -> None:
    repo = FakeSearchRepo([_user(1, "a@x.com")])
    with pytest.raises(ValidationException):
        await UserQueryService(repo).search({"enterprise_id_in": ["abc"]})
    assert repo.page_calls == []


def test_page_is_capped_so_offset_fits_the_database(service) -> None:
    query = service.build_query({"page": str(10**30), "per_page": "1000"})
    assert query.page == INT4_MAX
    assert query.offset < 2**63


async def test_autocomplete_run_returns_single_page() -> None:
    repo = FakeSearchRepo([_user(i, f"u{i}@x.com") for i in range(1, 6)])
    svc = UserQueryService(repo)
    page = await svc.search({"q": "u", "limit": "3"}, interactive=True)
    assert page.autocomplete is True
    assert len(page.items) == 3
    assert (page.page, page.per_page, page.total_count) == (1, 3, 3)
    assert repo.autocomplete_calls == [("u", 3, ())]
    assert repo.page_calls == []


async def test_general_run_passes_offset_and_limit() -> None:
    repo = FakeSearchRepo([_user(i, f"u{i}@x.com") for i in range(1, 41)])
    svc = UserQueryService(repo)
    page = await svc.search({"page": "2", "per_page": "15", "enterprise_id_in": ["7"]})
    assert page.autocomplete is False
    assert [u.id for u in page.items] == list(range(16, 31))
    assert page.total_count == 40
    _, _, enterprise_ids, offset, limit = repo.page_calls[0]
    assert (enterprise_ids, offset, limit) == ((7,), 15, 15)


async def test_project_shapes() -> None:
    repo = FakeSearchRepo([_user(1, "a@x.com")])
    svc = UserQueryService(repo)
    page = await svc.search({})
    assert svc.project(page, JsonShape.BASIC) == [{"id": 1, "name": "a@x.com"}]
    assert svc.project(page, "basic") == [{"id": 1, "name": "a@x.com"}]
    assert svc.project(page, None) == [
        {"id": 1, "email": "a@x.com", "bill_address": None, "ship_address": None}
    ]
