"""Seeding helpers for repository integration tests (flush only; the fixture rolls back)."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from shop_admin.infrastructure.persistence.models import (
    Address,
    Country,
    Enterprise,
    EnterpriseUser,
    Order,
    Role,
    State,
    User,
)


def unique(prefix: str) -> str:
    return f"{prefix}{uuid.uuid4().hex[:8]}"


async def add_address(db: AsyncSession, **fields) -> Address:
    address = Address(**fields)
    db.add(address)
    await db.flush()
    return address


async def add_address_with_region(db: AsyncSession, **fields) -> Address:
    country = Country(name="Australia", iso="AU")
    db.add(country)
    await db.flush()
    state = State(name="Victoria", abbr="VIC", country_id=country.id)
    db.add(state)
    await db.flush()
    return await add_address(db, state_id=state.id, country_id=country.id, **fields)


async def add_user(
    db: AsyncSession,
    email: str,
    *,
    bill: Address | None = None,
    ship: Address | None = None,
    **fields,
) -> User:
    user = User(
        email=email,
        bill_address_id=bill.id if bill else None,
        ship_address_id=ship.id if ship else None,
        **fields,
    )
    db.add(user)
    await db.flush()
    return user


async def add_enterprise(db: AsyncSession, *members: User) -> Enterprise:
    enterprise = Enterprise(name=unique("enterprise-"))
    db.add(enterprise)
    await db.flush()
    db.add_all(EnterpriseUser(enterprise_id=enterprise.id, user_id=m.id) for m in members)
    await db.flush()
    return enterprise


async def add_role(db: AsyncSession, name: str) -> Role:
    role = Role(name=name)
    db.add(role)
    await db.flush()
    return role


async def add_order(db: AsyncSession, user: User) -> Order:
    order = Order(number=unique("R"), user_id=user.id)
    db.add(order)
    await db.flush()
    return order
