# This project was developed with assistance from AI tools.
"""Tests for the toast auto-dismiss timer."""

import asyncio

from savantfs.client.notifications import DISMISS_AFTER_SECONDS, Notification, NotificationCenter

SENT = Notification(kind="success", message="sent")
FAILED = Notification(kind="error", message="failed")


def test_default_delay_is_four_seconds():
    assert DISMISS_AFTER_SECONDS == 4.0


async def test_notification_auto_dismisses():
    center = NotificationCenter(dismiss_after=0.01)
    center.show(SENT)
    assert center.current == SENT
    await asyncio.sleep(0.05)
    assert center.current is None
    assert not center.has_pending_dismissal


async def test_manual_dismiss_cancels_timer():
    center = NotificationCenter(dismiss_after=0.05)
    center.show(SENT)
    center.dismiss()
    assert center.current is None
    assert not center.has_pending_dismissal


async def test_new_notification_is_not_cleared_by_old_timer():
    center = NotificationCenter(dismiss_after=0.2)
    center.show(SENT)
    await asyncio.sleep(0.12)
    center.show(FAILED)
    await asyncio.sleep(0.12)  # first timer would have fired by now
    assert center.current == FAILED
    await asyncio.sleep(0.2)
    assert center.current is None


async def test_stale_expiry_leaves_current_notification():
    center = NotificationCenter(dismiss_after=10)
    center.show(FAILED)
    center._expire(SENT)
    assert center.current == FAILED
    center.dismiss()
