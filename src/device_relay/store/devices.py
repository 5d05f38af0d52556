"""Registry of last-known device state, keyed by hostname."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import Field

from device_relay.store.errors import MissingField
from device_relay.store.records import IdAllocator, Record, RecordStore

logger = logging.getLogger(__name__)


class Device(Record):
    device_hostname: str
    device_public_ip: str = "Unknown"
    accounts: list[str] = Field(default_factory=list)
    active_account: str | None = None
    first_seen: str
    last_seen: str

    def to_public(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class DeviceRegistry:
    def __init__(self, *, ids: IdAllocator | None = None) -> None:
        self._store: RecordStore[Device] = RecordStore(
            not_found_message="Device not found", ids=ids
        )

    def __len__(self) -> int:
        return len(self._store)

    def upsert(
        self,
        device_hostname: str | None,
        device_public_ip: str | None = None,
        accounts: list[str] | None = None,
        active_account: str | None = None,
    ) -> tuple[Device, bool]:
        """Register a device or refresh the record with the same hostname.

        Returns the stored device and whether it was newly created.
        """

        hostname = (device_hostname or "").strip()
        if not hostname:
            raise MissingField("device_hostname is required")

        now = datetime.now(tz=UTC).isoformat()

        def create(device_id: int) -> Device:
            return Device(
                id=device_id,
                device_hostname=hostname,
                device_public_ip=device_public_ip or "Unknown",
                accounts=list(accounts or []),
                active_account=active_account,
                first_seen=now,
                last_seen=now,
            )

        def update(existing: Device) -> Device:
            updates: dict[str, object] = {"last_seen": now}
            if device_public_ip:
                updates["device_public_ip"] = device_public_ip
            if accounts is not None:
                updates["accounts"] = list(accounts)
            if active_account is not None:
                updates["active_account"] = active_account
            return existing.model_copy(update=updates)

        device, created = self._store.upsert(
            lambda d: d.device_hostname == hostname, create, update
        )
        logger.info(
            "Device registered" if created else "Device updated",
            extra={
                "device_id": device.id,
                "device_hostname": device.device_hostname,
                "device_public_ip": device.device_public_ip,
                "active_account": device.active_account,
                "account_count": len(device.accounts),
            },
        )
        return device, created

    def find_by_hostname(self, device_hostname: str) -> Device | None:
        return self._store.find(lambda d: d.device_hostname == device_hostname)

    def list(self) -> list[Device]:
        return self._store.list()

    def remove_by_id(self, device_id: int) -> Device:
        removed = self._store.remove(device_id)
        logger.info(
            "Device removed",
            extra={"device_id": removed.id, "device_hostname": removed.device_hostname},
        )
        return removed

    def clear_all(self) -> int:
        removed = self._store.clear()
        logger.info("Devices cleared", extra={"count": removed})
        return removed
