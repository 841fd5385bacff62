"""User notifications: log-only sender for templated emails."""

from __future__ import annotations

import logging
from typing import Any

from shop_admin.application.interfaces.services import DISCOUNT_CHANGED_TEMPLATE
from shop_admin.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Subject line per template; unknown templates fall back to the template id.
TEMPLATE_SUBJECTS: dict[str, str] = {
    DISCOUNT_CHANGED_TEMPLATE: "Discount",
}


class LogOnlyNotificationSender:
    """INotificationSender implementation that logs instead of sending email.

    Use when no mail transport is configured. Production can swap in an SMTP
    or queue-based implementation; callers do not wait on delivery either way.
    """

    def __init__(self, from_email: str) -> None:
        self.from_email = from_email

    async def send(self, to_email: str, template_id: str, data: dict[str, Any]) -> None:
        """Log the notification; no actual email sent."""
        if not to_email:
            logger.info("Notify %s: no recipient, skipping send", template_id)
            return
        subject = TEMPLATE_SUBJECTS.get(template_id, template_id)
        logger.info(
            "Notify %s: would send %r from %s to %s",
            template_id,
            subject,
            self.from_email,
            to_email,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Notify %s data: %s", template_id, data)
