"""DTOs for role use cases (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoleResult:
    """Role read-model (result of get_by_id, list_distinct_by_name)."""

    id: int
    name: str
