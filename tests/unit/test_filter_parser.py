"""Tests for filter-bag parsing into FilterSpec / SortSpec."""

from datetime import datetime

from shop_admin.application.services.filter_parser import parse_filter_bag, parse_sorts
from shop_admin.domain.enums import FilterField, FilterOperator, SortDirection
from shop_admin.domain.value_objects import FilterSpec, SortSpec


def test_empty_bag_gives_no_filters() -> None:
    assert parse_filter_bag(None) == ((), ())
    assert parse_filter_bag({}) == ((), ())


def test_text_and_numeric_filters() -> None:
    filters, sorts = parse_filter_bag(
        {"email_cont": "example.com", "discount_gteq": "10"}
    )
    assert filters == (
        FilterSpec(FilterField.EMAIL, FilterOperator.CONT, "example.com"),
        FilterSpec(FilterField.DISCOUNT, FilterOperator.GTEQ, 10),
    )
    assert sorts == ()


def test_longest_operator_suffix_wins() -> None:
    """email_not_eq is NOT_EQ on email, not EQ on a field named email_not."""
    filters, _ = parse_filter_bag({"email_not_eq": "a@x.com"})
    assert filters == (
        FilterSpec(FilterField.EMAIL, FilterOperator.NOT_EQ, "a@x.com"),
    )


def test_address_fields() -> None:
    filters, _ = parse_filter_bag(
        {"bill_address_firstname_start": "Ja", "ship_address_lastname_eq": "Doe"}
    )
    assert [(f.field, f.operator) for f in filters] == [
        (FilterField.BILL_ADDRESS_FIRSTNAME, FilterOperator.START),
        (FilterField.SHIP_ADDRESS_LASTNAME, FilterOperator.EQ),
    ]


def test_in_accepts_list_or_comma_string() -> None:
    from_list, _ = parse_filter_bag({"id_in": ["1", "", "2"]})
    from_string, _ = parse_filter_bag({"id_in": "1,2"})
    expected = (FilterSpec(FilterField.ID, FilterOperator.IN, (1, 2)),)
    assert from_list == expected
    assert from_string == expected


def test_null_operator_takes_boolean() -> None:
    filters, _ = parse_filter_bag({"bill_address_firstname_null": "true"})
    assert filters == (
        FilterSpec(FilterField.BILL_ADDRESS_FIRSTNAME, FilterOperator.NULL, True),
    )


def test_datetime_coercion() -> None:
    filters, _ = parse_filter_bag({"created_at_gt": "2024-01-31T10:00:00"})
    assert filters[0].value == datetime(2024, 1, 31, 10, 0, 0)


def test_unknown_and_invalid_keys_are_ignored() -> None:
    """Unknown fields/operators, blanks, bad numbers and text ops on numbers are dropped."""
    filters, _ = parse_filter_bag(
        {
            "password_cont": "x",
            "email_matches": "x",
            "encrypted_password_eq": "x",
            "email_cont": "   ",
            "discount_eq": "ten",
            "discount_cont": "1",
            "id_in": ["", " "],
            "email_eq": ["a", "b"],
            "enterprise_id_in": ["3"],
        }
    )
    assert filters == ()


def test_integers_outside_column_range_are_ignored() -> None:
    """Values an integer column cannot hold are dropped, not sent to the database."""
    filters, _ = parse_filter_bag(
        {
            "id_eq": "99999999999999999999",
            "discount_gteq": str(-(2**31) - 1),
            "id_in": ["1", "2147483648"],
            "enterprise_limit_lt": "2147483647",
        }
    )
    assert filters == (
        FilterSpec(FilterField.ENTERPRISE_LIMIT, FilterOperator.LT, 2147483647),
    )


def test_sorts_from_bag() -> None:
    _, sorts = parse_filter_bag({"s": "email desc"})
    assert sorts == (SortSpec(FilterField.EMAIL, SortDirection.DESC),)


def test_parse_sorts_list_and_defaults() -> None:
    assert parse_sorts(["discount", "bill_address_lastname DESC", "nope asc", "id up"]) == (
        SortSpec(FilterField.DISCOUNT, SortDirection.ASC),
        SortSpec(FilterField.BILL_ADDRESS_LASTNAME, SortDirection.DESC),
    )
    assert parse_sorts(None) == ()
    assert parse_sorts("") == ()
