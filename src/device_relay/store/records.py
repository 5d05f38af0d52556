"""Generic in-memory record collection shared by the relay stores.

Records are immutable pydantic models carrying an integer `id`. Every
operation runs under one lock, so readers never see a half-applied mutation.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from device_relay.store.errors import NotFound


class Record(BaseModel):
    """Base for stored records. Records are replaced, never mutated."""

    model_config = ConfigDict(frozen=True)

    id: int


T = TypeVar("T", bound=Record)


class IdAllocator:
    """Issues strictly increasing ids shaped like millisecond timestamps.

    Two allocations in the same millisecond (or after the wall clock steps
    back) still get distinct, ordered ids.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def next_id(self) -> int:
        # Callers hold the owning store's lock.
        candidate = int(self._clock() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last


class RecordStore(Generic[T]):
    def __init__(
        self,
        *,
        not_found_message: str = "Record not found",
        ids: IdAllocator | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._records: list[T] = []
        self._ids = ids or IdAllocator()
        self._not_found_message = not_found_message

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, build: Callable[[int], T]) -> T:
        """Allocate an id, build the record for it and append it to the tail."""

        with self._lock:
            record = build(self._ids.next_id())
            self._records.append(record)
            return record

    def list(self) -> list[T]:
        with self._lock:
            return list(self._records)

    def get(self, record_id: int) -> T | None:
        with self._lock:
            return self._find_unlocked(lambda r: r.id == record_id)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        with self._lock:
            return self._find_unlocked(predicate)

    def remove(self, record_id: int) -> T:
        with self._lock:
            for idx, record in enumerate(self._records):
                if record.id == record_id:
                    return self._records.pop(idx)
        raise NotFound(self._not_found_message)

    def upsert(
        self,
        predicate: Callable[[T], bool],
        create: Callable[[int], T],
        update: Callable[[T], T],
    ) -> tuple[T, bool]:
        """Replace the first match in place, or append a new record.

        Returns the stored record and whether it was created.
        """

        with self._lock:
            for idx, existing in enumerate(self._records):
                if predicate(existing):
                    merged = update(existing)
                    self._records[idx] = merged
                    return merged, False
            record = create(self._ids.next_id())
            self._records.append(record)
            return record, True

    def clear(self) -> int:
        with self._lock:
            removed = len(self._records)
            self._records = []
            return removed

    def _find_unlocked(self, predicate: Callable[[T], bool]) -> T | None:
        for record in self._records:
            if predicate(record):
                return record
        return None
