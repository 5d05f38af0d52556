"""Pydantic request bodies for the REST server.

Every field is optional at the schema level: required fields are checked by
the stores so clients get the relay's own error messages instead of a
framework validation error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str | None = None
    # Passed through as sent; devices may report epoch numbers.
    timestamp: str | int | float | None = None
    event_type: str | None = None
    device_hostname: str | None = None
    device_public_ip: str | None = None


class TriggerRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Any JSON value; anything outside the enumeration is rejected by the queue.
    type: Any = None
    new_password: str | None = Field(default=None, repr=False)
    vault_username: str | None = None


class DeviceRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    device_hostname: str | None = None
    device_public_ip: str | None = None
    accounts: list[str] | None = None
    active_account: str | None = None
