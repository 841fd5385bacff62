"""User, role and order repository integration tests. Require Postgres; rolled back after each test."""

import pytest

from shop_admin.domain.exceptions import DuplicateEmailException, ResourceNotFoundException
from shop_admin.infrastructure.persistence.repositories import (
    OrderRepository,
    RoleRepository,
    UserRepository,
    UserRoleRepository,
)
from tests.integration.helpers import add_order, add_role, add_user, unique


@pytest.mark.requires_db
async def test_create_and_get_user(db_session) -> None:
    repo = UserRepository(db_session)
    email = f"{unique('new')}@x.com"
    created = await repo.create_user({"email": email, "discount": 5})
    assert created.id
    assert created.discount == 5
    assert created.enterprise_limit == 5
    assert created.show_api_key_view is False

    found = await repo.get_by_id(created.id)
    assert found is not None
    assert found.email == email
    assert found.bill_address is None


@pytest.mark.requires_db
async def test_create_with_missing_address_raises(db_session) -> None:
    repo = UserRepository(db_session)
    with pytest.raises(ResourceNotFoundException):
        await repo.create_user({"email": f"{unique('x')}@x.com", "bill_address_id": -1})


@pytest.mark.requires_db
async def test_duplicate_email_raises(db_session) -> None:
    email = f"{unique('dup')}@x.com"
    await add_user(db_session, email)
    repo = UserRepository(db_session)
    with pytest.raises(DuplicateEmailException):
        await repo.create_user({"email": email})


@pytest.mark.requires_db
async def test_update_user(db_session) -> None:
    user = await add_user(db_session, f"{unique('upd')}@x.com")
    repo = UserRepository(db_session)
    updated = await repo.update_user(user.id, {"discount": 20, "show_api_key_view": True})
    assert updated is not None
    assert updated.discount == 20
    assert updated.show_api_key_view is True
    assert await repo.update_user(-1, {"discount": 1}) is None


@pytest.mark.requires_db
async def test_replace_user_roles_is_full_replace(db_session) -> None:
    user = await add_user(db_session, f"{unique('roles')}@x.com")
    r1, r3, r5 = [await add_role(db_session, unique("role-")) for _ in range(3)]
    user_roles = UserRoleRepository(db_session)

    await user_roles.replace_user_roles(user.id, [r1.id])
    await user_roles.replace_user_roles(user.id, [r3.id, r5.id, r3.id])
    assert await user_roles.get_role_ids(user.id) == sorted([r3.id, r5.id])

    reloaded = await UserRepository(db_session).get_by_id(user.id)
    assert set(reloaded.role_ids) == {r3.id, r5.id}

    await user_roles.replace_user_roles(user.id, [])
    assert await user_roles.get_role_ids(user.id) == []


@pytest.mark.requires_db
async def test_roles_distinct_by_name(db_session) -> None:
    name = unique("picker-")
    first = await add_role(db_session, name)
    await add_role(db_session, name)
    roles = await RoleRepository(db_session).list_distinct_by_name()
    matching = [r for r in roles if r.name == name]
    assert [r.id for r in matching] == [first.id]
    assert await RoleRepository(db_session).get_by_id(-1) is None


@pytest.mark.requires_db
async def test_order_count_and_delete(db_session) -> None:
    buyer = await add_user(db_session, f"{unique('buyer')}@x.com")
    idle = await add_user(db_session, f"{unique('idle')}@x.com")
    await add_order(db_session, buyer)
    orders = OrderRepository(db_session)
    assert await orders.count_for_user(buyer.id) == 1
    assert await orders.count_for_user(idle.id) == 0

    repo = UserRepository(db_session)
    assert await repo.delete_user(idle.id) is True
    assert await repo.get_by_id(idle.id) is None
    assert await repo.delete_user(idle.id) is False
