"""
HybridStructure - one record list, two views.

A single doubly linked list holds announcements and events together:
- Full list view: every record, in insertion order
- Event queue view: only EVENT records, treated as a FIFO queue

The queue view is not a second container. It is delimited by two handles
into the same list, event_front (oldest event) and event_rear (newest
event). Events are only ever appended at the tail, so list order among
events is enqueue order.

Every mutation that can touch the event subsequence repairs the handles
incrementally:
- removing the front scans forward from its successor for the next event
- removing the rear scans backward from its predecessor for the previous event

Example:
    >>> board = HybridStructure()
    >>> board.add_announcement("Exam schedule", "2024-01-01", "Admin")
    '1'
    >>> board.enqueue_event("Sports Day", "2024-02-01", "Admin")
    '2'
    >>> board.peek_event().title
    'Sports Day'
    >>> [r.record_id for r in board.list_all()]
    ['1', '2']
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from bulletin.core.config import BulletinConfig
from bulletin.core.exceptions import (
    DuplicateIdError,
    EmptyQueueError,
    InvariantViolationError,
    RecordNotFoundError,
    ValidationError,
)
from bulletin.core.ids import CounterIdSupplier, IdSupplier, build_id_supplier
from bulletin.core.linked import LinkedArena
from bulletin.core.records import Record, RecordKind, StructureStats

logger = logging.getLogger(__name__)


def _is_event(record: Record) -> bool:
    return record.kind is RecordKind.EVENT


def _require_text(field: str, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a non-empty string")


class HybridStructure:
    """
    Doubly linked list of records with a FIFO queue view over its events.

    Records handed out are snapshots; changing them never changes the list.
    Not thread safe, see SynchronizedHybridStructure.
    """

    def __init__(
        self,
        id_supplier: IdSupplier | None = None,
        validate_fields: bool = True,
        check_invariants: bool = False,
    ):
        """
        Initialize an empty structure.

        Args:
            id_supplier: Source of new record ids (default: counter from 1)
            validate_fields: Reject blank title/date/author
            check_invariants: Verify invariants after every mutation (debug)
        """
        self._id_supplier = id_supplier or CounterIdSupplier()
        self._validate_fields = validate_fields
        self._check_after_mutation = check_invariants

        self._records: LinkedArena[Record] = LinkedArena()
        self._index: dict[str, int] = {}
        self._event_front: int | None = None
        self._event_rear: int | None = None
        self._event_count = 0

        logger.info(
            "HybridStructure initialized (id_supplier=%s, check_invariants=%s)",
            type(self._id_supplier).__name__,
            check_invariants,
        )

    @classmethod
    def from_config(cls, config: BulletinConfig | None = None) -> HybridStructure:
        """Build a structure from configuration (environment when config is None)."""
        config = config or BulletinConfig()
        return cls(
            id_supplier=build_id_supplier(config),
            validate_fields=config.validate_fields,
            check_invariants=config.check_invariants,
        )

    # ------------------------------------------------------------------
    # Whole-list operations
    # ------------------------------------------------------------------

    def insert(self, kind: RecordKind | str, title: str, date: str, author: str) -> str:
        """
        Create a record and link it at the tail of the list.

        Args:
            kind: Record kind
            title: Record title
            date: Display date
            author: Record author

        Returns:
            The id assigned to the new record

        Raises:
            ValidationError: If kind is unknown or a field is blank
            DuplicateIdError: If the id supplier returned a live id
        """
        try:
            kind = RecordKind(kind)
        except ValueError as e:
            raise ValidationError(f"Unknown record kind: {kind!r}") from e

        if self._validate_fields:
            _require_text("title", title)
            _require_text("date", date)
            _require_text("author", author)

        record_id = self._id_supplier.next_id()
        if record_id in self._index:
            logger.warning(f"Rejected insert: id {record_id!r} is already live")
            raise DuplicateIdError(record_id)

        record = Record(record_id=record_id, kind=kind, title=title, date=date, author=author)
        handle = self._records.append(record)
        self._index[record_id] = handle

        if record.is_event:
            if self._event_front is None:
                self._event_front = handle
            self._event_rear = handle
            self._event_count += 1

        logger.debug(f"Inserted {kind.value} {record_id!r}: {title[:50]}")
        self._after_mutation()
        return record_id

    def add_announcement(self, title: str, date: str, author: str) -> str:
        """Insert an ANNOUNCEMENT record. Returns its id."""
        return self.insert(RecordKind.ANNOUNCEMENT, title, date, author)

    def remove_by_id(self, record_id: str) -> Record:
        """
        Remove a record from the list.

        If the record is the event front or rear, the handle is moved to the
        nearest remaining event on the same side before the record is unlinked.

        Returns:
            The removed record

        Raises:
            RecordNotFoundError: If no live record has this id
        """
        handle = self._lookup(record_id)
        record = self._records.get(handle)

        if record.is_event:
            if handle == self._event_front:
                self._event_front = self._records.find_forward(
                    self._records.next_of(handle), _is_event
                )
            if handle == self._event_rear:
                self._event_rear = self._records.find_backward(
                    self._records.prev_of(handle), _is_event
                )
            self._event_count -= 1

        self._records.unlink(handle)
        del self._index[record_id]

        logger.debug(f"Removed {record.kind.value} {record_id!r}")
        self._after_mutation()
        return record

    def find_by_id(self, record_id: str) -> Record:
        """
        Find a record by id.

        Raises:
            RecordNotFoundError: If no live record has this id
        """
        return self._records.get(self._lookup(record_id)).model_copy()

    def update(self, record_id: str, title: str, date: str) -> Record:
        """
        Overwrite a record's title and date in place.

        Kind and id never change here, so the event queue is unaffected.

        Returns:
            Snapshot of the updated record

        Raises:
            RecordNotFoundError: If no live record has this id
            ValidationError: If title or date is blank
        """
        handle = self._lookup(record_id)

        if self._validate_fields:
            _require_text("title", title)
            _require_text("date", date)

        record = self._records.get(handle)
        record.title = title
        record.date = date

        logger.debug(f"Updated {record_id!r}: title={title[:50]!r}, date={date!r}")
        self._after_mutation()
        return record.model_copy()

    def list_all(self) -> Iterator[Record]:
        """Iterate snapshots of every record, head to tail."""
        for record in self._records.values():
            yield record.model_copy()

    # ------------------------------------------------------------------
    # Event queue view
    # ------------------------------------------------------------------

    def enqueue_event(self, title: str, date: str, author: str) -> str:
        """Append an EVENT record, making it the queue rear. Returns its id."""
        return self.insert(RecordKind.EVENT, title, date, author)

    def dequeue_event(self) -> Record:
        """
        Remove and return the oldest event.

        Raises:
            EmptyQueueError: If there are no events
        """
        target = self._event_front
        if target is None:
            raise EmptyQueueError("Event queue is empty")

        self._event_front = self._records.find_forward(self._records.next_of(target), _is_event)
        if target == self._event_rear:
            self._event_rear = None

        record = self._records.unlink(target)
        del self._index[record.record_id]
        self._event_count -= 1

        logger.debug(f"Dequeued event {record.record_id!r}: {record.title[:50]}")
        self._after_mutation()
        return record

    def peek_event(self) -> Record:
        """
        Return the oldest event without removing it.

        Raises:
            EmptyQueueError: If there are no events
        """
        if self._event_front is None:
            raise EmptyQueueError("Event queue is empty")
        return self._records.get(self._event_front).model_copy()

    def list_events(self) -> Iterator[Record]:
        """Iterate snapshots of the events in queue order (front to rear)."""
        for record in self._records.values():
            if record.is_event:
                yield record.model_copy()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def event_front(self) -> Record | None:
        """Snapshot of the oldest event, None when there are no events."""
        if self._event_front is None:
            return None
        return self._records.get(self._event_front).model_copy()

    @property
    def event_rear(self) -> Record | None:
        """Snapshot of the newest event, None when there are no events."""
        if self._event_rear is None:
            return None
        return self._records.get(self._event_rear).model_copy()

    @property
    def event_count(self) -> int:
        return self._event_count

    @property
    def is_empty(self) -> bool:
        return len(self._records) == 0

    def stats(self) -> StructureStats:
        """Get record counts and the current queue ends."""
        front = self.event_front
        rear = self.event_rear
        return StructureStats(
            total_records=len(self._records),
            announcements=len(self._records) - self._event_count,
            events=self._event_count,
            event_front_id=front.record_id if front else None,
            event_rear_id=rear.record_id if rear else None,
        )

    def clear(self) -> None:
        """Release every record."""
        released = len(self._records)
        self._records.clear()
        self._index.clear()
        self._event_front = None
        self._event_rear = None
        self._event_count = 0
        logger.info(f"Cleared HybridStructure ({released} records released)")

    def check_invariants(self) -> None:
        """
        Verify the structure's invariants.

        Raises:
            InvariantViolationError: Naming the first invariant that fails
        """
        forward = list(self._records.handles())
        backward = list(self._records.handles(reverse=True))
        if forward != backward[::-1] or len(forward) != len(self._records):
            raise self._violation(1, "forward and backward chains disagree")

        ids = [self._records.get(h).record_id for h in forward]
        if len(set(ids)) != len(ids):
            raise self._violation(2, "duplicate record ids")
        if self._index != dict(zip(ids, forward, strict=True)):
            raise self._violation(2, "id index out of sync with the list")

        events = [h for h in forward if _is_event(self._records.get(h))]
        expected_front = events[0] if events else None
        expected_rear = events[-1] if events else None
        if self._event_front != expected_front:
            raise self._violation(3, "event_front is not the first event")
        if self._event_rear != expected_rear:
            raise self._violation(4, "event_rear is not the last event")
        if (self._event_front is None) != (self._event_rear is None) or (
            self._event_front is None
        ) != (len(events) == 0):
            raise self._violation(5, "event_front/event_rear disagree on emptiness")
        if len(events) != self._event_count:
            raise self._violation(5, "event count out of sync")
        # handles are allocated in append order and events only append
        if events != sorted(events):
            raise self._violation(6, "events are not in enqueue order")

    def _violation(self, invariant: int, message: str) -> InvariantViolationError:
        logger.warning(f"Invariant {invariant} violated: {message}")
        return InvariantViolationError(f"Invariant {invariant} violated: {message}", invariant)

    def _after_mutation(self) -> None:
        if self._check_after_mutation:
            self.check_invariants()

    def _lookup(self, record_id: str) -> int:
        handle = self._index.get(record_id)
        if handle is None:
            raise RecordNotFoundError(record_id)
        return handle

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._index

    def __iter__(self) -> Iterator[Record]:
        return self.list_all()

    def __repr__(self) -> str:
        return f"HybridStructure(records={len(self._records)}, events={self._event_count})"


__all__ = ["HybridStructure"]
