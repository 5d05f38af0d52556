"""Trigger command queue.

Operators enqueue triggers; devices poll the pending list and acknowledge a
trigger by id once it has been carried out. Acknowledgment deletes the record:
the pending set is exactly the current queue contents.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Literal

from pydantic import Field

from device_relay.store.errors import InvalidType, NotFound
from device_relay.store.records import IdAllocator, Record, RecordStore

logger = logging.getLogger(__name__)


class TriggerType(StrEnum):
    RESET_PASSWORD = "ResetPassword"
    RESET_SYSTEM_PASSWORD = "ResetSystemPassword"
    LOCK_APP = "LockApp"
    REMOVE_USER = "RemoveUser"


VALID_TRIGGER_TYPES: tuple[str, ...] = tuple(t.value for t in TriggerType)

INVALID_TYPE_MESSAGE = f"Invalid trigger type. Valid types: {', '.join(VALID_TRIGGER_TYPES)}"


class Trigger(Record):
    type: TriggerType
    status: Literal["pending"] = "pending"
    created_at: str

    # Optional payloads are omitted from responses when absent.
    new_password: str | None = Field(default=None, repr=False)
    vault_username: str | None = None

    def to_public(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def parse_trigger_type(value: object) -> TriggerType:
    if not isinstance(value, str) or value not in VALID_TRIGGER_TYPES:
        raise InvalidType(INVALID_TYPE_MESSAGE, valid_types=VALID_TRIGGER_TYPES)
    return TriggerType(value)


class TriggerQueue:
    def __init__(self, *, ids: IdAllocator | None = None) -> None:
        self._store: RecordStore[Trigger] = RecordStore(
            not_found_message="Trigger not found", ids=ids
        )

    def __len__(self) -> int:
        return len(self._store)

    def enqueue(
        self,
        type: object,
        new_password: str | None = None,
        vault_username: str | None = None,
    ) -> Trigger:
        trigger_type = parse_trigger_type(type)
        created_at = datetime.now(tz=UTC).isoformat()

        def build(trigger_id: int) -> Trigger:
            return Trigger(
                id=trigger_id,
                type=trigger_type,
                created_at=created_at,
                new_password=new_password or None,
                vault_username=vault_username or None,
            )

        trigger = self._store.create(build)
        logger.info(
            "Trigger created",
            extra={
                "trigger_id": trigger.id,
                "trigger_type": trigger.type.value,
                "created_at": trigger.created_at,
                "has_new_password": trigger.new_password is not None,
                "vault_username": trigger.vault_username,
            },
        )
        return trigger

    def list_pending(self) -> list[Trigger]:
        return self._store.list()

    def get(self, trigger_id: int) -> Trigger | None:
        return self._store.get(trigger_id)

    def acknowledge(self, trigger_id: int) -> Trigger:
        """Remove and return the trigger; raises NotFound for unknown ids."""

        try:
            removed = self._store.remove(trigger_id)
        except NotFound:
            logger.info("Trigger not found", extra={"trigger_id": trigger_id})
            raise
        logger.info(
            "Trigger acknowledged",
            extra={"trigger_id": removed.id, "trigger_type": removed.type.value},
        )
        return removed

    def clear_all(self) -> int:
        removed = self._store.clear()
        logger.info("Triggers cleared", extra={"count": removed})
        return removed
