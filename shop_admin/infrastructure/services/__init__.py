"""Infrastructure services: outbound collaborators behind application ports."""

from shop_admin.infrastructure.services.notification_service import (
    LogOnlyNotificationSender,
)

__all__ = ["LogOnlyNotificationSender"]
