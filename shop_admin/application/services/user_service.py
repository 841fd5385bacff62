"""User application service: create, update, delete with role replacement and discount notification."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from shop_admin.application.dtos.user import UserResult, UserWriteResult
from shop_admin.application.interfaces.services import DISCOUNT_CHANGED_TEMPLATE
from shop_admin.domain.exceptions import (
    ResourceNotFoundException,
    RoleNotFoundException,
    UserHasOrdersException,
)
from shop_admin.shared.telemetry import get_logger, traced
from shop_admin.shared.utils.parsing import INT4_MAX, is_blank

if TYPE_CHECKING:
    from shop_admin.application.interfaces.repositories import (
        IOrderRepository,
        IRoleRepository,
        IUserRepository,
        IUserRoleRepository,
    )
    from shop_admin.application.interfaces.services import INotificationSender

logger = get_logger(__name__)

# Attributes an admin may write; everything else in a payload is dropped.
PERMITTED_ATTRIBUTES = frozenset({
    "email",
    "discount",
    "enterprise_limit",
    "show_api_key_view",
    "bill_address_id",
    "ship_address_id",
})

MSG_CREATED = "Created successfully"
MSG_ACCOUNT_UPDATED = "Account updated"
MSG_EMAIL_UPDATED = "Email updated"
MSG_API_KEY_VIEW_TOGGLED = "API key view toggled"


def _permitted(attrs: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in attrs.items() if k in PERMITTED_ATTRIBUTES}


def _update_message(before: UserResult, after: UserResult) -> str:
    if before.show_api_key_view != after.show_api_key_view:
        return MSG_API_KEY_VIEW_TOGGLED
    if before.email != after.email:
        return MSG_EMAIL_UPDATED
    return MSG_ACCOUNT_UPDATED


class UserService:
    """Admin writes on users.

    Role ids are resolved before any write, so an unknown id fails the whole
    request; callers run this service on one transactional session so the
    user write and role replacement commit or roll back together.

    Discount notifications are queued, not sent: the caller flushes them with
    send_pending_notifications() after the transaction commits.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        role_repo: IRoleRepository,
        user_role_repo: IUserRoleRepository,
        order_repo: IOrderRepository,
        notifier: INotificationSender,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._user_role_repo = user_role_repo
        self._order_repo = order_repo
        self._notifier = notifier
        self._pending_notifications: list[UserResult] = []

    async def resolve_role_ids(self, role_ids: Sequence[Any]) -> list[int]:
        """Drop blanks and resolve every id to a role.

        Ids outside 1..INT4_MAX cannot name a role and count as missing.

        Raises:
            RoleNotFoundException: listing every id that is non-numeric or unknown.
        """
        resolved: list[int] = []
        missing: list[str] = []
        for raw in role_ids:
            if is_blank(raw):
                continue
            try:
                role_id = int(str(raw).strip())
            except ValueError:
                missing.append(str(raw))
                continue
            if not 1 <= role_id <= INT4_MAX:
                missing.append(str(raw))
                continue
            role = await self._role_repo.get_by_id(role_id)
            if role is None:
                missing.append(str(raw))
            elif role.id not in resolved:
                resolved.append(role.id)
        if missing:
            raise RoleNotFoundException(missing)
        return resolved

    @traced("users.create")
    async def create_user(
        self,
        attrs: Mapping[str, Any],
        role_ids: Sequence[Any] | None = None,
    ) -> UserWriteResult:
        """Create a user and, when role_ids is given, assign exactly those roles."""
        resolved = await self.resolve_role_ids(role_ids) if role_ids is not None else None
        created = await self._user_repo.create_user(_permitted(attrs))
        if resolved is not None:
            await self._user_role_repo.replace_user_roles(created.id, resolved)
            created = await self._reload(created.id)
        logger.info("Created user %s", created.id)
        return UserWriteResult(user=created, message=MSG_CREATED)

    @traced("users.update")
    async def update_user(
        self,
        user_id: int,
        changes: Mapping[str, Any],
        role_ids: Sequence[Any] | None = None,
    ) -> UserWriteResult:
        """Update permitted attributes and roles; queue a discount notification.

        Raises:
            ResourceNotFoundException: user does not exist.
            RoleNotFoundException: a submitted role id does not resolve.
        """
        before = await self._user_repo.get_by_id(user_id)
        if before is None:
            raise ResourceNotFoundException("user", user_id)
        resolved = await self.resolve_role_ids(role_ids) if role_ids is not None else None

        updated = await self._user_repo.update_user(user_id, _permitted(changes))
        if updated is None:
            raise ResourceNotFoundException("user", user_id)
        if resolved is not None:
            await self._user_role_repo.replace_user_roles(user_id, resolved)
            updated = await self._reload(user_id)

        if updated.discount != before.discount:
            self._pending_notifications.append(updated)
        return UserWriteResult(user=updated, message=_update_message(before, updated))

    async def send_pending_notifications(self) -> None:
        """Send queued discount notifications once; call after commit."""
        pending, self._pending_notifications = self._pending_notifications, []
        for user in pending:
            await self.notify_discount_changed(user)

    async def notify_discount_changed(self, user: UserResult) -> None:
        """Send the discount-changed notification; skipped when the user has no email."""
        if is_blank(user.email):
            logger.debug("User %s has no email; discount notification skipped", user.id)
            return
        await self._notifier.send(
            user.email, DISCOUNT_CHANGED_TEMPLATE, {"discount": user.discount}
        )

    @traced("users.delete")
    async def delete_user(self, user_id: int) -> None:
        """Delete a user who owns no orders.

        Raises:
            ResourceNotFoundException: user does not exist.
            UserHasOrdersException: user owns at least one order.
        """
        order_count = await self._order_repo.count_for_user(user_id)
        if order_count:
            raise UserHasOrdersException(user_id, order_count)
        if not await self._user_repo.delete_user(user_id):
            raise ResourceNotFoundException("user", user_id)
        logger.info("Deleted user %s", user_id)

    async def _reload(self, user_id: int) -> UserResult:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user
