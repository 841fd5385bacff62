"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application services.
Read routes get a plain session (get_db); write routes get one
transactional session (transactional_session) shared by every repository
the service touches, so a user write and its role replacement commit
together.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shop_admin.application.services import UserQueryService, UserService
from shop_admin.core.config import Settings, get_settings
from shop_admin.infrastructure.persistence.database import (
    get_db,
    transactional_session,
)
from shop_admin.infrastructure.persistence.repositories import (
    OrderRepository,
    RoleRepository,
    UserRepository,
    UserRoleRepository,
    UserSearchRepository,
)
from shop_admin.infrastructure.services import LogOnlyNotificationSender

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_notification_sender(settings: SettingsDep) -> LogOnlyNotificationSender:
    """Notification sender for discount emails."""
    return LogOnlyNotificationSender(from_email=settings.notification_from_email)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return UserRepository(db)


async def get_role_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RoleRepository:
    return RoleRepository(db)


async def get_user_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: SettingsDep,
) -> UserQueryService:
    """UserQueryService over a read session, with listing limits from settings."""
    return UserQueryService(
        UserSearchRepository(db),
        default_per_page=settings.admin_users_per_page,
        default_limit=settings.autocomplete_default_limit,
        max_page_size=settings.max_page_size,
    )


async def get_user_service(
    notifier: Annotated[LogOnlyNotificationSender, Depends(get_notification_sender)],
) -> AsyncIterator[UserService]:
    """UserService with every repository on the same transactional session.

    Queued notifications are sent after the transaction commits; a request
    that fails or rolls back sends none.
    """
    async with transactional_session() as db:
        service = UserService(
            user_repo=UserRepository(db),
            role_repo=RoleRepository(db),
            user_role_repo=UserRoleRepository(db),
            order_repo=OrderRepository(db),
            notifier=notifier,
        )
        yield service
    await service.send_pending_notifications()
