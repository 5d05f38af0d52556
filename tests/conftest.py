"""Test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from device_relay.config import RelaySettings
from device_relay.server.app import create_app
from device_relay.store import RelayState

_ENV_VARS = ("PORT", "RELAY_HOST", "LOG_LEVEL", "RELAY_CORS_ORIGINS")


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no relay variables set."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(clean_env: Path) -> RelaySettings:
    """Provide default settings isolated from the host environment."""
    return RelaySettings()


@pytest.fixture
def relay() -> RelayState:
    """Provide a fresh set of in-memory stores."""
    return RelayState()


@pytest.fixture
def client(settings: RelaySettings, relay: RelayState) -> TestClient:
    """Provide an HTTP client bound to a fresh app and its stores."""
    return TestClient(create_app(settings, relay))
