"""Projection view models for user listings.

Each view is a fixed set of fields with an explicit to_dict(); nothing else
on the underlying user or address is ever serialized.
"""

from dataclasses import dataclass
from typing import Any

from shop_admin.application.dtos.user import AddressResult, UserResult


@dataclass(frozen=True)
class NamedRefView:
    """Referenced entity exposed by name only (state, country)."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class AddressView:
    """Address allowlist: names, lines, city, zipcode, phone, state name, country name."""

    firstname: str | None
    lastname: str | None
    address1: str | None
    address2: str | None
    city: str | None
    zipcode: str | None
    phone: str | None
    state: NamedRefView | None
    country: NamedRefView | None

    @classmethod
    def from_result(cls, address: AddressResult) -> "AddressView":
        return cls(
            firstname=address.firstname,
            lastname=address.lastname,
            address1=address.address1,
            address2=address.address2,
            city=address.city,
            zipcode=address.zipcode,
            phone=address.phone,
            state=(
                NamedRefView(address.state_name)
                if address.state_name is not None
                else None
            ),
            country=(
                NamedRefView(address.country_name)
                if address.country_name is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "firstname": self.firstname,
            "lastname": self.lastname,
            "address1": self.address1,
            "address2": self.address2,
            "city": self.city,
            "zipcode": self.zipcode,
            "phone": self.phone,
            "state": self.state.to_dict() if self.state else None,
            "country": self.country.to_dict() if self.country else None,
        }


@dataclass(frozen=True)
class BasicUserView:
    """Lightweight picker entry: id and email (as name)."""

    id: int
    name: str

    @classmethod
    def from_result(cls, user: UserResult) -> "BasicUserView":
        return cls(id=user.id, name=user.email)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class DefaultUserView:
    """id, email, and both addresses through AddressView."""

    id: int
    email: str
    bill_address: AddressView | None
    ship_address: AddressView | None

    @classmethod
    def from_result(cls, user: UserResult) -> "DefaultUserView":
        return cls(
            id=user.id,
            email=user.email,
            bill_address=(
                AddressView.from_result(user.bill_address) if user.bill_address else None
            ),
            ship_address=(
                AddressView.from_result(user.ship_address) if user.ship_address else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "bill_address": self.bill_address.to_dict() if self.bill_address else None,
            "ship_address": self.ship_address.to_dict() if self.ship_address else None,
        }
