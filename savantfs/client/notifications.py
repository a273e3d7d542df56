# This project was developed with assistance from AI tools.
"""Dismissible toast notifications with a cancellable auto-dismiss timer."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

DISMISS_AFTER_SECONDS = 4.0


@dataclass(frozen=True)
class Notification:
    kind: Literal["success", "error"]
    message: str


class NotificationCenter:
    """Holds at most one notification at a time.

    Every show() or dismiss() cancels the pending dismissal timer first, so
    a timer armed for an earlier notification can never clear a newer one.
    Must be used from within a running event loop.
    """

    def __init__(self, dismiss_after: float = DISMISS_AFTER_SECONDS):
        self._dismiss_after = dismiss_after
        self._current: Notification | None = None
        self._timer: asyncio.TimerHandle | None = None

    @property
    def current(self) -> Notification | None:
        return self._current

    @property
    def has_pending_dismissal(self) -> bool:
        return self._timer is not None

    def show(self, notification: Notification) -> None:
        self._cancel_timer()
        self._current = notification
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._dismiss_after, self._expire, notification)

    def dismiss(self) -> None:
        """Clear immediately (the user closed the toast)."""
        self._cancel_timer()
        self._current = None

    def _expire(self, notification: Notification) -> None:
        self._timer = None
        if self._current is notification:
            self._current = None
        else:
            logger.debug("Ignoring stale dismissal for %r", notification)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
