"""In-memory stores behind the relay API."""

from __future__ import annotations

from device_relay.store.devices import Device, DeviceRegistry
from device_relay.store.errors import InvalidType, MissingField, NotFound, RelayError
from device_relay.store.messages import Message, MessageLog
from device_relay.store.state import RelayState
from device_relay.store.triggers import (
    VALID_TRIGGER_TYPES,
    Trigger,
    TriggerQueue,
    TriggerType,
)

__all__ = [
    "VALID_TRIGGER_TYPES",
    "Device",
    "DeviceRegistry",
    "InvalidType",
    "Message",
    "MessageLog",
    "MissingField",
    "NotFound",
    "RelayError",
    "RelayState",
    "Trigger",
    "TriggerQueue",
    "TriggerType",
]
