"""Shared test fixtures for the lovense-cloud test suite.

Provides credentials, settings and a mock relay so components can be
tested without reaching the Lovense cloud.
"""

from __future__ import annotations

import logging
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from pydantic import SecretStr

from lovense_cloud.config.settings import Settings
from lovense_cloud.domain.models import Credentials
from lovense_cloud.relay.base import Relay


# ---------------------------------------------------------------------------
# Configuration Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's real token and .env out of the tests."""
    for var in ("LOVENSE_TOKEN", "LOVENSE_UID", "LOVENSE_CLOUD_LOVENSE_TOKEN", "LOVENSE_CLOUD_LOVENSE_UID"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging so they don't outlive capsys."""
    yield
    package_logger = logging.getLogger("lovense_cloud")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(token="test-token", uid="test-uid")


@pytest.fixture
def no_credentials() -> Credentials:
    return Credentials(token="", uid="mai")


@pytest.fixture
def settings() -> Settings:
    """Settings with a configured token."""
    return Settings(lovense_token=SecretStr("test-token"), lovense_uid="test-uid")


# ---------------------------------------------------------------------------
# Mock Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_relay() -> AsyncMock:
    """A mock Relay that answers every call with a success body."""
    relay = AsyncMock(spec=Relay)
    relay.send_command.return_value = {"code": 200, "type": "OK"}
    relay.request_qr_code.return_value = {
        "code": 0,
        "message": "Success",
        "result": True,
        "data": {"qr": "https://example.invalid/qr.jpg", "code": "ABC123"},
    }
    return relay
