"""Domain value objects for user search.

Value objects are immutable and self-validating. They have no identity, only value.
"""

from dataclasses import dataclass
from typing import Any

from shop_admin.domain.enums import FilterField, FilterOperator, SortDirection


@dataclass(frozen=True)
class FilterSpec:
    """One typed predicate: field, operator, and an already-coerced value.

    IN carries a tuple of values; NULL carries a bool (True = IS NULL).
    """

    field: FilterField
    operator: FilterOperator
    value: Any

    def __post_init__(self) -> None:
        if self.operator.is_text_match and self.field.value_type is not str:
            raise ValueError(
                f"Operator '{self.operator.value}' requires a text field, "
                f"got '{self.field.value}'"
            )
        if self.operator is FilterOperator.IN and not isinstance(self.value, tuple):
            raise ValueError("Operator 'in' requires a tuple of values")
        if self.operator is FilterOperator.NULL and not isinstance(self.value, bool):
            raise ValueError("Operator 'null' requires a boolean value")


@dataclass(frozen=True)
class SortSpec:
    """Ordering on an allowlisted field."""

    field: FilterField
    direction: SortDirection = SortDirection.ASC
