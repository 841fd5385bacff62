"""User repository. Interface methods return application DTOs (UserResult)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from shop_admin.application.dtos.user import AddressResult, UserResult
from shop_admin.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
)
from shop_admin.infrastructure.persistence.models.address import Address
from shop_admin.infrastructure.persistence.models.user import User
from shop_admin.infrastructure.persistence.repositories.base import BaseRepository

_ADDRESS_FKS = ("bill_address_id", "ship_address_id")


def user_load_options() -> tuple[LoaderOption, ...]:
    """Eager loads needed to build a UserResult (addresses with state/country, roles)."""
    return (
        selectinload(User.bill_address).selectinload(Address.state),
        selectinload(User.bill_address).selectinload(Address.country),
        selectinload(User.ship_address).selectinload(Address.state),
        selectinload(User.ship_address).selectinload(Address.country),
        selectinload(User.roles),
    )


def _address_to_result(a: Address | None) -> AddressResult | None:
    if a is None:
        return None
    return AddressResult(
        id=a.id,
        firstname=a.firstname,
        lastname=a.lastname,
        address1=a.address1,
        address2=a.address2,
        city=a.city,
        zipcode=a.zipcode,
        phone=a.phone,
        company=a.company,
        alternative_phone=a.alternative_phone,
        state_id=a.state_id,
        state_name=a.state.name if a.state else None,
        country_id=a.country_id,
        country_name=a.country.name if a.country else None,
    )


def user_to_result(u: User) -> UserResult:
    """Map ORM User (loaded with user_load_options) to UserResult."""
    return UserResult(
        id=u.id,
        email=u.email,
        discount=u.discount,
        enterprise_limit=u.enterprise_limit,
        show_api_key_view=u.show_api_key_view,
        bill_address=_address_to_result(u.bill_address),
        ship_address=_address_to_result(u.ship_address),
        role_ids=tuple(r.id for r in u.roles),
    )


class UserRepository(BaseRepository[User]):
    """User repository: get with addresses, create, update, delete."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _get_loaded(self, user_id: int) -> User | None:
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .options(*user_load_options())
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _ensure_addresses_exist(self, attrs: Mapping[str, Any]) -> None:
        """Raise ResourceNotFoundException for address FKs that point nowhere."""
        for key in _ADDRESS_FKS:
            address_id = attrs.get(key)
            if address_id is None:
                continue
            found = await self.db.scalar(select(Address.id).where(Address.id == address_id))
            if found is None:
                raise ResourceNotFoundException("address", address_id)

    async def get_by_id(self, user_id: int) -> UserResult | None:
        user = await self._get_loaded(user_id)
        return user_to_result(user) if user else None

    async def create_user(self, attrs: Mapping[str, Any]) -> UserResult:
        """Create user; raise DuplicateEmailException on unique constraint violation."""
        await self._ensure_addresses_exist(attrs)
        user = User(**attrs)
        try:
            created = await self.create(user)
        except IntegrityError:
            raise DuplicateEmailException() from None
        loaded = await self._get_loaded(created.id)
        assert loaded is not None
        return user_to_result(loaded)

    async def update_user(
        self, user_id: int, changes: Mapping[str, Any]
    ) -> UserResult | None:
        """Apply changes; raise DuplicateEmailException when the new email is taken."""
        user = await super().get_by_id(user_id)
        if user is None:
            return None
        await self._ensure_addresses_exist(changes)
        for key, value in changes.items():
            setattr(user, key, value)
        try:
            await self.db.flush()
        except IntegrityError:
            raise DuplicateEmailException() from None
        loaded = await self._get_loaded(user_id)
        return user_to_result(loaded) if loaded else None

    async def delete_user(self, user_id: int) -> bool:
        user = await super().get_by_id(user_id)
        if user is None:
            return False
        await self.delete(user)
        return True
