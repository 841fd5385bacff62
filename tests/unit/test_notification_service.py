"""Tests for the log-only notification sender."""

import logging

from shop_admin.application.interfaces.services import DISCOUNT_CHANGED_TEMPLATE
from shop_admin.infrastructure.services import LogOnlyNotificationSender


async def test_logs_subject_and_recipient(caplog) -> None:
    sender = LogOnlyNotificationSender(from_email="support@example.com")
    with caplog.at_level(logging.INFO):
        await sender.send("jane@example.com", DISCOUNT_CHANGED_TEMPLATE, {"discount": 10})
    assert "'Discount'" in caplog.text
    assert "jane@example.com" in caplog.text
    assert "support@example.com" in caplog.text


async def test_no_recipient_skips(caplog) -> None:
    sender = LogOnlyNotificationSender(from_email="support@example.com")
    with caplog.at_level(logging.INFO):
        await sender.send("", DISCOUNT_CHANGED_TEMPLATE, {"discount": 10})
    assert "skipping" in caplog.text
