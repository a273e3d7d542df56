# This project was developed with assistance from AI tools.
"""Shared fixtures.

The real app from ``savantfs.main`` is a module singleton. Dependency
overrides and the mail relay singleton are reset after every test so a
relay configured in one test never leaks into the next.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

import savantfs.services.mail as mail_mod
from savantfs.main import app as real_app
from savantfs.services.mail import get_mail_relay


@pytest.fixture(autouse=True)
def _clean_state():
    yield
    real_app.dependency_overrides.clear()
    mail_mod._relay = None


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_relay(app):
    """Relay that accepts every message; installed as the route dependency."""
    relay = AsyncMock()
    app.dependency_overrides[get_mail_relay] = lambda: relay
    return relay


@pytest.fixture
def failing_relay(app):
    """Relay whose send() raises, as if the SMTP server refused the login."""
    relay = AsyncMock()
    relay.send.side_effect = mail_mod.MailDeliveryError("SMTP relay refused or unreachable")
    app.dependency_overrides[get_mail_relay] = lambda: relay
    return relay
