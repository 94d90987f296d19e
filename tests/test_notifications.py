"""Tests for order notifications"""
import logging

from store.services.notification_service import send_order_notification


def test_send_order_notification(caplog):
    caplog.set_level(logging.INFO, logger="store.services.notification_service")

    result = send_order_notification("s1", 1001, "10.00")

    assert result == {"session_id": "s1", "order_id": 1001, "status": "sent"}
    assert "order 1001 paid (10.00)" in caplog.text
