"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

from pathlib import Path

import pytest

import device_relay.main as relay_main
from device_relay.config import RelaySettings


def test_serve_uses_port_override(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    served: list[RelaySettings] = []
    levels: list[str] = []
    monkeypatch.setattr(relay_main, "serve", served.append)
    monkeypatch.setattr(relay_main, "configure_logging", levels.append)
    monkeypatch.setenv("PORT", "5000")

    assert relay_main.main(["serve", "--port", "4321", "--log-level", "DEBUG"]) == 0

    assert served[0].port == 4321
    assert served[0].host == "0.0.0.0"
    assert levels == ["DEBUG"]


def test_serve_defaults_to_environment(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    served: list[RelaySettings] = []
    monkeypatch.setattr(relay_main, "serve", served.append)
    monkeypatch.setattr(relay_main, "configure_logging", lambda _level: None)
    monkeypatch.setenv("PORT", "5000")

    assert relay_main.main(["serve"]) == 0
    assert served[0].port == 5000


def test_invalid_port_returns_error(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(relay_main, "serve", lambda _s: pytest.fail("should not serve"))

    assert relay_main.main(["serve", "--port", "0"]) == 2


def test_serve_runs_uvicorn(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []

    def fake_run(app: object, **kwargs: object) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr("uvicorn.run", fake_run)

    relay_main.serve(RelaySettings(port=3100))

    assert calls[0]["host"] == "0.0.0.0"
    assert calls[0]["port"] == 3100


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        relay_main.build_parser().parse_args([])
