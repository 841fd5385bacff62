"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AddressResult:
    """Address read-model. Carries every stored column; projection decides what is exposed."""

    id: int
    firstname: str | None
    lastname: str | None
    address1: str | None
    address2: str | None
    city: str | None
    zipcode: str | None
    phone: str | None
    company: str | None = None
    alternative_phone: str | None = None
    state_id: int | None = None
    state_name: str | None = None
    country_id: int | None = None
    country_name: str | None = None


@dataclass(frozen=True)
class UserResult:
    """User read-model with both addresses loaded."""

    id: int
    email: str
    discount: int
    enterprise_limit: int
    show_api_key_view: bool
    bill_address: AddressResult | None = None
    ship_address: AddressResult | None = None
    role_ids: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class UserWriteResult:
    """Result of create/update: the saved user and the flash-style message."""

    user: UserResult
    message: str
