"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging

from device_relay.logging import MASK, JsonFormatter, redact


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("device_relay.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(trigger_id=42)))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "device_relay.test"
    assert payload["message"] == "hello"
    assert payload["extra"] == {"trigger_id": 42}


def test_json_formatter_masks_sensitive_extra_fields() -> None:
    line = JsonFormatter().format(
        _record(new_password="abc123", has_new_password=True, body={"api_token": "t0k"})
    )

    assert "abc123" not in line
    assert "t0k" not in line
    extra = json.loads(line)["extra"]
    assert extra["new_password"] == MASK
    assert extra["has_new_password"] is True
    assert extra["body"] == {"api_token": MASK}


def test_redact_walks_nested_lists() -> None:
    value = {"items": [{"password": "x", "name": "n"}]}

    assert redact(value) == {"items": [{"password": MASK, "name": "n"}]}
