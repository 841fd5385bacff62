"""Service interfaces (ports) for the application layer.

Protocols define contracts for outbound collaborators (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol

DISCOUNT_CHANGED_TEMPLATE = "discount-changed"


class INotificationSender(Protocol):
    """Protocol for fire-and-forget user notifications (e.g. discount emails).

    Delivery, retry, and dead-lettering are the implementation's concern.
    """

    async def send(self, to_email: str, template_id: str, data: dict[str, Any]) -> None:
        """Dispatch template_id to to_email with template data."""
