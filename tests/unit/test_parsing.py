"""Tests for lenient request-value parsing and LIKE escaping."""

import pytest

from shop_admin.shared.utils.parsing import (
    INT4_MAX,
    INT4_MIN,
    coerce_positive_int,
    fits_int4,
    is_blank,
    parse_id_list,
)
from shop_admin.shared.utils.sanitization import escape_like


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 15),
        ("", 15),
        ("abc", 15),
        ("0", 15),
        ("-3", 15),
        (True, 15),
        ("20", 20),
        (" 7 ", 7),
        (30, 30),
    ],
)
def test_coerce_positive_int_falls_back_to_default(raw, expected) -> None:
    """Missing, non-numeric and non-positive values give the default."""
    assert coerce_positive_int(raw, 15) == expected


def test_coerce_positive_int_clamps_to_maximum() -> None:
    assert coerce_positive_int("5000", 100, 1000) == 1000
    assert coerce_positive_int("999", 100, 1000) == 999


def test_is_blank() -> None:
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert not is_blank("x")
    assert not is_blank(0)


def test_parse_id_list_skips_blanks_and_collapses_duplicates() -> None:
    assert parse_id_list(["", "3", "5", "3", None]) == (3, 5)


def test_parse_id_list_from_comma_string() -> None:
    assert parse_id_list("4, 2,,4") == (4, 2)


def test_parse_id_list_scalar_and_none() -> None:
    assert parse_id_list(7) == (7,)
    assert parse_id_list(None) == ()
    assert parse_id_list(["", "  "]) == ()


@pytest.mark.parametrize(
    "raw",
    [["abc"], ["3", "x1"], "0", "-4", str(INT4_MAX + 1), {"a": "1"}],
)
def test_parse_id_list_rejects_entries_that_are_not_ids(raw) -> None:
    """A bad entry raises rather than being dropped from the set."""
    with pytest.raises(ValueError):
        parse_id_list(raw)


def test_parse_id_list_accepts_int4_maximum() -> None:
    assert parse_id_list([str(INT4_MAX)]) == (INT4_MAX,)


def test_fits_int4_bounds() -> None:
    assert fits_int4(INT4_MAX)
    assert fits_int4(INT4_MIN)
    assert not fits_int4(INT4_MAX + 1)
    assert not fits_int4(INT4_MIN - 1)
    assert not fits_int4(99999999999999999999)


def test_escape_like_escapes_wildcards_and_escape_char() -> None:
    assert escape_like("50%_off") == "50\\%\\_off"
    assert escape_like("a\\b") == "a\\\\b"
    assert escape_like("jane") == "jane"
