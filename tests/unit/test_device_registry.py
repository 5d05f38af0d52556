"""Unit tests for the device registry."""

from __future__ import annotations

import threading
from datetime import datetime

import pytest

from device_relay.store import DeviceRegistry, MissingField, NotFound


@pytest.mark.parametrize("hostname", [None, "", "   "])
def test_upsert_requires_hostname(hostname: str | None) -> None:
    registry = DeviceRegistry()

    with pytest.raises(MissingField) as excinfo:
        registry.upsert(hostname)

    assert excinfo.value.message == "device_hostname is required"
    assert registry.list() == []


def test_upsert_creates_with_defaults() -> None:
    registry = DeviceRegistry()

    device, created = registry.upsert("vm-01")

    assert created is True
    assert device.device_public_ip == "Unknown"
    assert device.accounts == []
    assert device.active_account is None
    assert device.first_seen == device.last_seen


def test_upsert_same_hostname_merges_into_one_record() -> None:
    registry = DeviceRegistry()

    first, _ = registry.upsert("vm-01", device_public_ip="203.0.113.7", accounts=["alice"])
    second, created = registry.upsert("vm-01", accounts=["alice", "bob"], active_account="bob")

    assert created is False
    assert len(registry.list()) == 1
    assert second.id == first.id
    assert second.accounts == ["alice", "bob"]
    assert second.active_account == "bob"
    assert second.first_seen == first.first_seen
    assert datetime.fromisoformat(second.last_seen) >= datetime.fromisoformat(first.last_seen)


def test_public_ip_only_overwritten_by_non_empty_value() -> None:
    registry = DeviceRegistry()
    registry.upsert("vm-01", device_public_ip="203.0.113.7")

    kept, _ = registry.upsert("vm-01", device_public_ip="")
    assert kept.device_public_ip == "203.0.113.7"

    changed, _ = registry.upsert("vm-01", device_public_ip="198.51.100.2")
    assert changed.device_public_ip == "198.51.100.2"


def test_update_without_accounts_keeps_previous_accounts() -> None:
    registry = DeviceRegistry()
    registry.upsert("vm-01", accounts=["alice"], active_account="alice")

    device, _ = registry.upsert("vm-01")

    assert device.accounts == ["alice"]
    assert device.active_account == "alice"


def test_find_remove_and_clear() -> None:
    registry = DeviceRegistry()
    a, _ = registry.upsert("vm-01")
    b, _ = registry.upsert("vm-02")

    assert registry.find_by_hostname("vm-02") == b
    assert registry.remove_by_id(a.id) == a
    assert registry.list() == [b]

    with pytest.raises(NotFound) as excinfo:
        registry.remove_by_id(a.id)
    assert excinfo.value.message == "Device not found"

    assert registry.clear_all() == 1
    assert registry.list() == []


def test_concurrent_upserts_of_one_hostname_keep_one_record() -> None:
    registry = DeviceRegistry()
    first, _ = registry.upsert("vm-01", accounts=["seed"])
    start = threading.Barrier(8)

    def worker(n: int) -> None:
        start.wait()
        for i in range(25):
            registry.upsert("vm-01", accounts=[f"user-{n}-{i}"])

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    devices = registry.list()
    assert len(devices) == 1
    assert devices[0].id == first.id
    assert devices[0].first_seen == first.first_seen
    assert len(devices[0].accounts) == 1
    assert devices[0].accounts[0].startswith("user-")
