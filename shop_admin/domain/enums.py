"""Domain enumerations for the shop admin service.

Enums represent fixed sets of domain values: searchable user fields, filter
operators, sort directions, and JSON projection shapes.
"""

from datetime import datetime
from enum import Enum


class FilterField(str, Enum):
    """User fields that may appear in a filter bag or sort.

    Anything outside this allowlist is never translated into a query.
    """

    ID = "id"
    EMAIL = "email"
    DISCOUNT = "discount"
    ENTERPRISE_LIMIT = "enterprise_limit"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    BILL_ADDRESS_FIRSTNAME = "bill_address_firstname"
    BILL_ADDRESS_LASTNAME = "bill_address_lastname"
    SHIP_ADDRESS_FIRSTNAME = "ship_address_firstname"
    SHIP_ADDRESS_LASTNAME = "ship_address_lastname"

    @property
    def value_type(self) -> type:
        """Python type filter values for this field are coerced to."""
        if self in (FilterField.ID, FilterField.DISCOUNT, FilterField.ENTERPRISE_LIMIT):
            return int
        if self in (FilterField.CREATED_AT, FilterField.UPDATED_AT):
            return datetime
        return str


class FilterOperator(str, Enum):
    """Predicate operators, named after their filter-bag key suffix (e.g. email_cont)."""

    EQ = "eq"
    NOT_EQ = "not_eq"
    CONT = "cont"
    START = "start"
    END = "end"
    LT = "lt"
    LTEQ = "lteq"
    GT = "gt"
    GTEQ = "gteq"
    IN = "in"
    NULL = "null"

    @property
    def is_text_match(self) -> bool:
        """True for substring operators (only valid on string fields)."""
        return self in (FilterOperator.CONT, FilterOperator.START, FilterOperator.END)


class SortDirection(str, Enum):
    """Sort direction for general-mode results."""

    ASC = "asc"
    DESC = "desc"


class JsonShape(str, Enum):
    """Projection shapes for user listings (json_format parameter)."""

    BASIC = "basic"
    DEFAULT = "default"

    @classmethod
    def from_param(cls, raw: str | None) -> "JsonShape":
        """Map json_format to a shape; anything but 'basic' is the default shape."""
        if raw and raw.strip().lower() == cls.BASIC.value:
            return cls.BASIC
        return cls.DEFAULT
