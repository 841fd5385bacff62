"""Parsing of raw request values (query strings, form lists).

Numeric helpers fall back to a default on malformed input; parse_id_list
is the strict exception, for id sets that narrow a query.
"""

from collections.abc import Iterable, Mapping
from typing import Any

# Range of a Postgres integer (int4) column.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


def coerce_positive_int(raw: Any, default: int, maximum: int | None = None) -> int:
    """Return raw as a positive int, or default when missing, non-numeric, or < 1.

    Values above maximum (when given) are clamped to maximum.
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    if value < 1:
        return default
    if maximum is not None and value > maximum:
        return maximum
    return value


def is_blank(value: Any) -> bool:
    """True for None, empty strings, and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def fits_int4(value: int) -> bool:
    """True when value can be bound to an integer (int4) column."""
    return INT4_MIN <= value <= INT4_MAX


def parse_id_list(raw: Iterable[Any] | Any) -> tuple[int, ...]:
    """Parse ids from a list (or comma-separated string); blanks are skipped.

    Order is preserved and duplicates removed. Unlike the helpers above,
    a bad entry raises instead of being dropped.

    Raises:
        ValueError: an entry is not a positive integer within int4 range.
    """
    if raw is None:
        return ()
    if isinstance(raw, Mapping):
        raise ValueError("expected a list of ids")
    if isinstance(raw, str):
        items: Iterable[Any] = raw.split(",")
    elif isinstance(raw, Iterable):
        items = raw
    else:
        items = [raw]
    seen: dict[int, None] = {}
    for item in items:
        if is_blank(item):
            continue
        try:
            value = int(str(item).strip())
        except ValueError:
            raise ValueError(f"not an id: {item!r}") from None
        if value < 1 or value > INT4_MAX:
            raise ValueError(f"id out of range: {item!r}")
        seen.setdefault(value, None)
    return tuple(seen)
