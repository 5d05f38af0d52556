"""Process-wide relay state handed to request handlers."""

from __future__ import annotations

from dataclasses import dataclass, field

from device_relay.store.devices import DeviceRegistry
from device_relay.store.messages import MessageLog
from device_relay.store.triggers import TriggerQueue


@dataclass
class RelayState:
    messages: MessageLog = field(default_factory=MessageLog)
    triggers: TriggerQueue = field(default_factory=TriggerQueue)
    devices: DeviceRegistry = field(default_factory=DeviceRegistry)
