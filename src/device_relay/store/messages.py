"""Append-only log of status messages posted by devices."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from device_relay.store.errors import MissingField
from device_relay.store.records import IdAllocator, Record, RecordStore

logger = logging.getLogger(__name__)

DEFAULT_EVENT_TYPE = "shutdown"
UNKNOWN = "Unknown"


class Message(Record):
    message: str
    # Client-claimed time; `received_at` is when the server saw it.
    timestamp: str | int | float
    event_type: str
    device_hostname: str
    device_public_ip: str
    received_at: str

    def to_public(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class MessageLog:
    def __init__(self, *, ids: IdAllocator | None = None) -> None:
        self._store: RecordStore[Message] = RecordStore(ids=ids)

    def __len__(self) -> int:
        return len(self._store)

    def append(
        self,
        message: str | None,
        timestamp: str | int | float | None = None,
        event_type: str | None = None,
        device_hostname: str | None = None,
        device_public_ip: str | None = None,
    ) -> Message:
        if not message:
            logger.warning("Rejected message without text")
            raise MissingField("Message is required")

        received_at = datetime.now(tz=UTC).isoformat()

        def build(message_id: int) -> Message:
            return Message(
                id=message_id,
                message=message,
                timestamp=timestamp or received_at,
                event_type=event_type or DEFAULT_EVENT_TYPE,
                device_hostname=device_hostname or UNKNOWN,
                device_public_ip=device_public_ip or UNKNOWN,
                received_at=received_at,
            )

        record = self._store.create(build)
        logger.info(
            "Message received",
            extra={
                "message_id": record.id,
                "content": record.message,
                "client_timestamp": record.timestamp,
                "event_type": record.event_type,
                "device_hostname": record.device_hostname,
                "device_public_ip": record.device_public_ip,
                "received_at": record.received_at,
            },
        )
        return record

    def list(self) -> list[Message]:
        return self._store.list()

    def clear_all(self) -> int:
        removed = self._store.clear()
        logger.info("Messages cleared", extra={"count": removed})
        return removed
