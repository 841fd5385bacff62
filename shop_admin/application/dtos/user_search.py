"""DTOs for user search: the parsed query and the page of results."""

import math
from dataclasses import dataclass, field

from shop_admin.application.dtos.user import UserResult
from shop_admin.domain.value_objects import FilterSpec, SortSpec


@dataclass(frozen=True)
class UserSearchQuery:
    """Search request built from raw caller parameters.

    autocomplete=True means prefix search capped at limit; otherwise filters,
    sorts, page and per_page drive a paginated general search. enterprise_ids
    narrows either mode.
    """

    autocomplete: bool
    prefix: str | None = None
    limit: int = 100
    filters: tuple[FilterSpec, ...] = ()
    sorts: tuple[SortSpec, ...] = ()
    page: int = 1
    per_page: int = 15
    enterprise_ids: tuple[int, ...] = ()

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class ResultPage:
    """One page of users plus the counts needed for pagination metadata.

    Autocomplete results are a single page: page=1, per_page=limit,
    total_count=len(items).
    """

    items: list[UserResult] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    per_page: int = 15
    autocomplete: bool = False

    @property
    def pages(self) -> int:
        return max(1, math.ceil(self.total_count / self.per_page))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def prev_page(self) -> int | None:
        return self.page - 1 if self.page > 1 else None

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.page < self.pages else None

    @property
    def from_index(self) -> int:
        """1-based index of the first item on this page (0 when the page is empty)."""
        return self.offset + 1 if self.items else 0

    @property
    def to_index(self) -> int:
        """1-based index of the last item on this page (0 when the page is empty)."""
        return self.offset + len(self.items) if self.items else 0

    def metadata(self) -> dict[str, int | None]:
        """Pagination metadata for the JSON index response."""
        return {
            "count": self.total_count,
            "page": self.page,
            "per_page": self.per_page,
            "pages": self.pages,
            "prev": self.prev_page,
            "next": self.next_page,
            "from": self.from_index,
            "to": self.to_index,
        }
