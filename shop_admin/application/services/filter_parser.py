"""Parse a ransack-style filter bag into typed FilterSpec / SortSpec values.

Keys are ``<field>_<operator>`` (e.g. ``email_cont``, ``discount_gteq``,
``bill_address_firstname_start``); ``s`` holds sorts (``"email desc"``).
Keys outside the field/operator allowlist, blank values and values that do
not coerce to the field's type (including integers outside int4 range) are
ignored, never passed to the query layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from shop_admin.domain.enums import FilterField, FilterOperator, SortDirection
from shop_admin.domain.value_objects import FilterSpec, SortSpec
from shop_admin.shared.telemetry.logging import get_logger
from shop_admin.shared.utils.parsing import fits_int4, is_blank

logger = get_logger(__name__)

SORT_KEY = "s"
# Handled by the query service, not the filter resolver.
RESERVED_KEYS = frozenset({SORT_KEY, "enterprise_id_in"})

# Longest suffix first so "not_eq" wins over "eq".
_OPERATORS = sorted(FilterOperator, key=lambda op: len(op.value), reverse=True)

_TRUE = frozenset({"1", "true", "t", "yes"})
_FALSE = frozenset({"0", "false", "f", "no"})


def _split_key(key: str) -> tuple[FilterField, FilterOperator] | None:
    for op in _OPERATORS:
        suffix = f"_{op.value}"
        if not key.endswith(suffix):
            continue
        try:
            return FilterField(key[: -len(suffix)]), op
        except ValueError:
            continue
    return None


def _coerce(field: FilterField, raw: Any) -> Any:
    """Coerce one raw value to the field's type. Raises ValueError when it does not fit."""
    value_type = field.value_type
    if value_type is int:
        value = int(str(raw).strip())
        if not fits_int4(value):
            raise ValueError(f"out of integer range: {raw!r}")
        return value
    if value_type is datetime:
        return datetime.fromisoformat(str(raw).strip())
    return str(raw)


def _coerce_bool(raw: Any) -> bool:
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _build_spec(field: FilterField, op: FilterOperator, raw: Any) -> FilterSpec:
    if op is FilterOperator.NULL:
        return FilterSpec(field, op, _coerce_bool(raw))
    if op is FilterOperator.IN:
        items = raw.split(",") if isinstance(raw, str) else list(raw)
        values = tuple(_coerce(field, item) for item in items if not is_blank(item))
        if not values:
            raise ValueError("empty list")
        return FilterSpec(field, op, values)
    if isinstance(raw, (list, tuple, Mapping)):
        raise ValueError(f"operator '{op.value}' takes a single value")
    return FilterSpec(field, op, _coerce(field, raw))


def parse_sorts(raw: Any) -> tuple[SortSpec, ...]:
    """Parse ``"field [asc|desc]"`` entries (string or list); invalid entries are skipped."""
    if is_blank(raw):
        return ()
    entries = list(raw) if isinstance(raw, (list, tuple)) else [raw]
    sorts: list[SortSpec] = []
    for entry in entries:
        parts = str(entry).split()
        if not parts or len(parts) > 2:
            continue
        try:
            field = FilterField(parts[0])
            direction = (
                SortDirection(parts[1].lower()) if len(parts) == 2 else SortDirection.ASC
            )
        except ValueError:
            logger.debug("Ignoring unknown sort %r", entry)
            continue
        sorts.append(SortSpec(field, direction))
    return tuple(sorts)


def parse_filter_bag(
    bag: Mapping[str, Any] | None,
) -> tuple[tuple[FilterSpec, ...], tuple[SortSpec, ...]]:
    """Return (filters, sorts) from a filter bag; None or empty gives no filters."""
    if not bag:
        return (), ()
    filters: list[FilterSpec] = []
    for key, raw in bag.items():
        if key in RESERVED_KEYS or is_blank(raw):
            continue
        parsed = _split_key(key)
        if parsed is None:
            logger.debug("Ignoring unknown filter key %r", key)
            continue
        field, op = parsed
        try:
            filters.append(_build_spec(field, op, raw))
        except (TypeError, ValueError) as e:
            logger.debug("Ignoring filter %r: %s", key, e)
    return tuple(filters), parse_sorts(bag.get(SORT_KEY))
