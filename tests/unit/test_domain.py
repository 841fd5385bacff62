"""Tests for domain exceptions, enums and value objects."""

import pytest

from shop_admin.domain.enums import FilterField, FilterOperator, JsonShape
from shop_admin.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    RoleNotFoundException,
    ShopAdminException,
    SqlNotConfiguredException,
    UserHasOrdersException,
    ValidationException,
)
from shop_admin.domain.value_objects import FilterSpec


def test_base_exception_default_error_code() -> None:
    """ShopAdminException uses class name as error_code when not provided."""
    exc = ShopAdminException("Something failed")
    assert exc.error_code == "ShopAdminException"
    assert exc.details == {}
    assert exc.to_dict() == {
        "error": "ShopAdminException",
        "message": "Something failed",
        "details": {},
    }


def test_validation_exception_field() -> None:
    exc = ValidationException("Invalid format", field="email")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "email"}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("user", 42)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "user", "resource_id": "42"}


def test_role_not_found_lists_every_id() -> None:
    exc = RoleNotFoundException(["7", "abc"])
    assert exc.error_code == "ROLE_NOT_FOUND"
    assert exc.details == {"role_ids": ["7", "abc"]}
    assert "7" in exc.message and "abc" in exc.message


def test_user_has_orders() -> None:
    exc = UserHasOrdersException(5, 2)
    assert exc.error_code == "USER_HAS_ORDERS"
    assert exc.details == {"user_id": 5, "order_count": 2}


def test_duplicate_email_and_sql_not_configured() -> None:
    assert DuplicateEmailException().error_code == "DUPLICATE_EMAIL"
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_json_shape_from_param() -> None:
    assert JsonShape.from_param("basic") is JsonShape.BASIC
    assert JsonShape.from_param(" BASIC ") is JsonShape.BASIC
    assert JsonShape.from_param(None) is JsonShape.DEFAULT
    assert JsonShape.from_param("fancy") is JsonShape.DEFAULT


def test_filter_field_value_types() -> None:
    assert FilterField.DISCOUNT.value_type is int
    assert FilterField.EMAIL.value_type is str


def test_filter_spec_rejects_text_operator_on_number() -> None:
    with pytest.raises(ValueError):
        FilterSpec(FilterField.DISCOUNT, FilterOperator.CONT, "1")


def test_filter_spec_in_requires_tuple_and_null_requires_bool() -> None:
    with pytest.raises(ValueError):
        FilterSpec(FilterField.ID, FilterOperator.IN, [1, 2])
    with pytest.raises(ValueError):
        FilterSpec(FilterField.EMAIL, FilterOperator.NULL, "yes")
