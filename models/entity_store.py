"""
In-memory table used by the repositories.

A table is an ordered list of records exposing an integer ``id``. There is
no index: lookups are linear scans, which is fine for the table sizes this
service holds. Ids come from ``next_id()`` (max + 1), so an id freed by
deleting the current maximum can be handed out again.
"""
from __future__ import annotations

import threading
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class EntityStore(Generic[T]):
    def __init__(self):
        self._rows: List[T] = []
        # Held by repositories around every mutation; re-entrant so the
        # cascade can hold it while calling back into a repository.
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._rows)

    def insert(self, record: T) -> T:
        """Append a record whose id was already assigned by the caller."""
        self._rows.append(record)
        return record

    def find_by_id(self, record_id: int) -> Optional[T]:
        for row in self._rows:
            if row.id == record_id:
                return row
        return None

    def remove(self, record_id: int) -> Optional[T]:
        """Remove the first record with this id and return it (None if absent)."""
        for index, row in enumerate(self._rows):
            if row.id == record_id:
                return self._rows.pop(index)
        return None

    def all(self) -> List[T]:
        """All records in insertion order, as a new list."""
        return list(self._rows)

    def next_id(self) -> int:
        return max((row.id for row in self._rows), default=0) + 1
