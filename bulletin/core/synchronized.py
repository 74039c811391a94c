"""
Thread-safe wrapper around HybridStructure.

HybridStructure mutates several links per operation, so concurrent callers
must not interleave. SynchronizedHybridStructure serializes every public
call on one RLock.

Iteration is materialized under the lock: list_all() and list_events()
return lists, not lazy iterators, so no caller ever walks the list while
another thread is relinking it.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from bulletin.core.hybrid import HybridStructure

if TYPE_CHECKING:
    from bulletin.core.config import BulletinConfig
    from bulletin.core.records import Record, RecordKind, StructureStats


class SynchronizedHybridStructure:
    """
    HybridStructure guarded by a single re-entrant lock.

    Example:
        >>> board = SynchronizedHybridStructure()
        >>> event_id = board.enqueue_event("Sports Day", "2024-02-01", "Admin")
        >>> board.dequeue_event().record_id == event_id
        True
    """

    def __init__(self, structure: HybridStructure | None = None):
        self._structure = structure or HybridStructure()
        self._lock = RLock()

    @classmethod
    def from_config(cls, config: BulletinConfig | None = None) -> SynchronizedHybridStructure:
        return cls(HybridStructure.from_config(config))

    def insert(self, kind: RecordKind | str, title: str, date: str, author: str) -> str:
        with self._lock:
            return self._structure.insert(kind, title, date, author)

    def add_announcement(self, title: str, date: str, author: str) -> str:
        with self._lock:
            return self._structure.add_announcement(title, date, author)

    def remove_by_id(self, record_id: str) -> Record:
        with self._lock:
            return self._structure.remove_by_id(record_id)

    def find_by_id(self, record_id: str) -> Record:
        with self._lock:
            return self._structure.find_by_id(record_id)

    def update(self, record_id: str, title: str, date: str) -> Record:
        with self._lock:
            return self._structure.update(record_id, title, date)

    def list_all(self) -> list[Record]:
        with self._lock:
            return list(self._structure.list_all())

    def enqueue_event(self, title: str, date: str, author: str) -> str:
        with self._lock:
            return self._structure.enqueue_event(title, date, author)

    def dequeue_event(self) -> Record:
        with self._lock:
            return self._structure.dequeue_event()

    def peek_event(self) -> Record:
        with self._lock:
            return self._structure.peek_event()

    def list_events(self) -> list[Record]:
        with self._lock:
            return list(self._structure.list_events())

    def stats(self) -> StructureStats:
        with self._lock:
            return self._structure.stats()

    def clear(self) -> None:
        with self._lock:
            self._structure.clear()

    def check_invariants(self) -> None:
        with self._lock:
            self._structure.check_invariants()

    @property
    def event_count(self) -> int:
        with self._lock:
            return self._structure.event_count

    def __len__(self) -> int:
        with self._lock:
            return len(self._structure)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._structure


__all__ = ["SynchronizedHybridStructure"]
