"""User search and projection: autocomplete vs. filtered search, enterprise scoping, JSON shapes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from shop_admin.application.dtos.user_search import ResultPage, UserSearchQuery
from shop_admin.application.dtos.user_views import BasicUserView, DefaultUserView
from shop_admin.application.services.filter_parser import parse_filter_bag
from shop_admin.domain.enums import JsonShape
from shop_admin.domain.exceptions import ValidationException
from shop_admin.shared.telemetry import add_span_attributes, get_logger, traced
from shop_admin.shared.utils.parsing import (
    INT4_MAX,
    coerce_positive_int,
    parse_id_list,
)

if TYPE_CHECKING:
    from shop_admin.application.interfaces.repositories import IUserSearchRepository

logger = get_logger(__name__)

ENTERPRISE_IDS_PARAM = "enterprise_id_in"


def _enterprise_scope(params: Mapping[str, Any]) -> tuple[int, ...]:
    """Union of enterprise_id_in at the top level and inside a q filter bag.

    Raises:
        ValidationException: an entry is not a valid enterprise id.
    """
    q = params.get("q")
    sources = [params.get(ENTERPRISE_IDS_PARAM)]
    if isinstance(q, Mapping):
        sources.append(q.get(ENTERPRISE_IDS_PARAM))
    ids: dict[int, None] = {}
    for raw in sources:
        try:
            parsed = parse_id_list(raw)
        except ValueError as e:
            raise ValidationException(str(e), field=ENTERPRISE_IDS_PARAM) from e
        for enterprise_id in parsed:
            ids.setdefault(enterprise_id, None)
    return tuple(ids)


class UserQueryService:
    """Read-only user search over IUserSearchRepository.

    Autocomplete mode: interactive request with a non-blank string ``q``;
    prefix match on email and bill/ship first/last name, capped at ``limit``,
    unordered. General mode: everything else; ``q`` is a filter bag, results
    are paginated by ``page`` / ``per_page``. ``enterprise_id_in`` narrows both.
    """

    def __init__(
        self,
        search_repo: IUserSearchRepository,
        *,
        default_per_page: int = 15,
        default_limit: int = 100,
        max_page_size: int = 1000,
    ) -> None:
        self.search_repo = search_repo
        self.default_per_page = default_per_page
        self.default_limit = default_limit
        self.max_page_size = max_page_size

    def build_query(
        self, params: Mapping[str, Any], *, interactive: bool = False
    ) -> UserSearchQuery:
        """Turn raw request parameters into a UserSearchQuery.

        Bad page, per_page and limit values fall back to defaults (page is
        capped at the int4 maximum). A malformed enterprise scope is
        rejected, never dropped.

        Raises:
            ValidationException: enterprise_id_in holds a non-id entry.
        """
        q = params.get("q")
        enterprise_ids = _enterprise_scope(params)

        if interactive and isinstance(q, str) and q.strip():
            return UserSearchQuery(
                autocomplete=True,
                prefix=q.strip(),
                limit=coerce_positive_int(
                    params.get("limit"), self.default_limit, self.max_page_size
                ),
                enterprise_ids=enterprise_ids,
            )

        # A plain-string q outside autocomplete has no filter meaning.
        filters, sorts = parse_filter_bag(q if isinstance(q, Mapping) else None)
        return UserSearchQuery(
            autocomplete=False,
            filters=filters,
            sorts=sorts,
            page=coerce_positive_int(params.get("page"), 1, INT4_MAX),
            per_page=coerce_positive_int(
                params.get("per_page"), self.default_per_page, self.max_page_size
            ),
            enterprise_ids=enterprise_ids,
        )

    @traced("users.search")
    async def search(
        self, params: Mapping[str, Any], *, interactive: bool = False
    ) -> ResultPage:
        """Build the query from params and run it."""
        return await self.run(self.build_query(params, interactive=interactive))

    async def run(self, query: UserSearchQuery) -> ResultPage:
        """Execute an already-built query."""
        if query.autocomplete:
            items = await self.search_repo.autocomplete(
                query.prefix or "", query.limit, query.enterprise_ids
            )
            add_span_attributes(mode="autocomplete", count=len(items))
            logger.debug(
                "User autocomplete returned %d rows (limit=%d, enterprises=%d)",
                len(items),
                query.limit,
                len(query.enterprise_ids),
            )
            return ResultPage(
                items=items,
                total_count=len(items),
                page=1,
                per_page=query.limit,
                autocomplete=True,
            )

        items, total = await self.search_repo.filtered_page(
            query.filters,
            query.sorts,
            query.enterprise_ids,
            query.offset,
            query.per_page,
        )
        add_span_attributes(mode="general", count=total, page=query.page)
        logger.debug(
            "User search page %d returned %d of %d rows (%d filters)",
            query.page,
            len(items),
            total,
            len(query.filters),
        )
        return ResultPage(
            items=items,
            total_count=total,
            page=query.page,
            per_page=query.per_page,
        )

    def project(
        self, result_page: ResultPage, shape: JsonShape | str | None = JsonShape.DEFAULT
    ) -> list[dict[str, Any]]:
        """Serialize the page's users in the requested shape (basic or default)."""
        if not isinstance(shape, JsonShape):
            shape = JsonShape.from_param(shape)
        if shape is JsonShape.BASIC:
            return [BasicUserView.from_result(u).to_dict() for u in result_page.items]
        return [DefaultUserView.from_result(u).to_dict() for u in result_page.items]
