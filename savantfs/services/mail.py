# This project was developed with assistance from AI tools.
"""Outbound mail relay.

Enquiry dispatch depends only on the ``MailRelay`` protocol so its logic can
be exercised without a network. ``SmtpMailRelay`` is the production
implementation: a plain SMTP connection (port 587 by default) upgraded with
STARTTLS when the server offers it (required before logging in), run in a thread-pool executor because
smtplib is blocking.

The module exposes a singleton initialised at app startup via
``init_mail_relay()``. The relay holds configuration only and opens a fresh
connection per message.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from functools import partial
from typing import Protocol

from ..core.config import Settings, settings

logger = logging.getLogger(__name__)


class MailRelayError(Exception):
    """The relay did not accept a message."""


class MailConfigurationError(MailRelayError):
    """Relay settings are missing."""


class MailDeliveryError(MailRelayError):
    """The relay rejected the message or could not be reached."""


class MailRelay(Protocol):
    async def send(self, message: EmailMessage) -> None:
        """Hand one message to the relay. Raises MailRelayError on failure."""
        ...


class SmtpMailRelay:
    """Thin wrapper around smtplib.SMTP."""

    def __init__(
        self,
        host: str | None,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._timeout = timeout

    @property
    def host(self) -> str | None:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    def _open(self) -> smtplib.SMTP:
        if self._timeout is None:
            return smtplib.SMTP(self._host, self._port)
        return smtplib.SMTP(self._host, self._port, timeout=self._timeout)

    def _send_sync(self, message: EmailMessage) -> None:
        with self._open() as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            elif self._username and self._password:
                # Credentials never go over an unencrypted connection.
                raise smtplib.SMTPNotSupportedError("relay does not offer STARTTLS")
            if self._username and self._password:
                smtp.login(self._username, self._password)
            smtp.send_message(message)

    async def send(self, message: EmailMessage) -> None:
        """Send one message, raising MailRelayError subclasses on failure."""
        if not self._host:
            raise MailConfigurationError("SMTP_HOST is not configured")

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, partial(self._send_sync, message))
        except (smtplib.SMTPException, OSError) as exc:
            # Host and exception type only; the cause stays on __cause__.
            raise MailDeliveryError(
                f"SMTP relay {self._host}:{self._port} refused or unreachable "
                f"({type(exc).__name__})"
            ) from exc


def build_smtp_relay(cfg: Settings) -> SmtpMailRelay:
    return SmtpMailRelay(
        host=cfg.SMTP_HOST,
        port=cfg.SMTP_PORT,
        username=cfg.SMTP_USER,
        password=cfg.SMTP_PASS.get_secret_value() if cfg.SMTP_PASS else None,
        timeout=cfg.SMTP_TIMEOUT,
    )


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_relay: MailRelay | None = None


def init_mail_relay(cfg: Settings) -> MailRelay:
    """Initialise the singleton (called once from app lifespan)."""
    global _relay  # noqa: PLW0603
    _relay = build_smtp_relay(cfg)
    return _relay


def get_mail_relay() -> MailRelay:
    """FastAPI dependency returning the relay, built from settings on first use."""
    if _relay is None:
        return init_mail_relay(settings)
    return _relay


def log_mail_status() -> None:
    """Log whether enquiries can be dispatched. Call at startup."""
    if settings.SMTP_HOST:
        logger.warning(
            "Mail relay: CONFIGURED (host=%s, port=%s, auth=%s)",
            settings.SMTP_HOST,
            settings.SMTP_PORT,
            "yes" if settings.SMTP_USER and settings.SMTP_PASS else "no",
        )
    else:
        logger.warning("Mail relay: NOT CONFIGURED (set SMTP_HOST); enquiries will fail")
