"""
Arena-backed doubly linked list.

Values live in slots indexed by integer handles; ``prev``/``next`` links are
handles rather than object references. Handles are never reused while the
arena lives, so a stale handle can only miss, never alias another value.

Features:
- O(1) append / unlink
- Forward and backward iteration over handles
- Predicate scans from any handle in either direction
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from itertools import count
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Slot(Generic[T]):
    """One arena slot: the stored value and its neighbour handles."""

    value: T
    prev: int | None = None
    next: int | None = None


class LinkedArena(Generic[T]):
    """
    Doubly linked list stored as an arena of slots.

    Example:
        >>> arena = LinkedArena[str]()
        >>> a = arena.append("a")
        >>> b = arena.append("b")
        >>> arena.unlink(a)
        'a'
        >>> list(arena.values())
        ['b']
    """

    def __init__(self) -> None:
        self._slots: dict[int, Slot[T]] = {}
        self._handles = count()
        self._head: int | None = None
        self._tail: int | None = None

    @property
    def head(self) -> int | None:
        """Handle of the first value, None when empty."""
        return self._head

    @property
    def tail(self) -> int | None:
        """Handle of the last value, None when empty."""
        return self._tail

    def append(self, value: T) -> int:
        """
        Link value at the tail.

        Returns:
            Handle of the new slot
        """
        handle = next(self._handles)
        slot = Slot(value, prev=self._tail)

        if self._tail is None:
            self._head = handle
        else:
            self._slots[self._tail].next = handle

        self._slots[handle] = slot
        self._tail = handle
        return handle

    def unlink(self, handle: int) -> T:
        """
        Unlink a slot, stitching its neighbours together and fixing head/tail.

        Args:
            handle: Handle of a live slot

        Returns:
            The value that was stored in the slot

        Raises:
            KeyError: If handle is not live
        """
        slot = self._slots.pop(handle)

        if slot.prev is None:
            self._head = slot.next
        else:
            self._slots[slot.prev].next = slot.next

        if slot.next is None:
            self._tail = slot.prev
        else:
            self._slots[slot.next].prev = slot.prev

        slot.prev = None
        slot.next = None
        return slot.value

    def get(self, handle: int) -> T:
        """Get the value stored at handle."""
        return self._slots[handle].value

    def next_of(self, handle: int) -> int | None:
        """Handle after handle, None at the tail."""
        return self._slots[handle].next

    def prev_of(self, handle: int) -> int | None:
        """Handle before handle, None at the head."""
        return self._slots[handle].prev

    def find_forward(self, start: int | None, predicate: Callable[[T], bool]) -> int | None:
        """
        Scan toward the tail from start (inclusive) for a matching value.

        Returns:
            Handle of the first match, None if the scan runs off the tail
        """
        handle = start
        while handle is not None:
            slot = self._slots[handle]
            if predicate(slot.value):
                return handle
            handle = slot.next
        return None

    def find_backward(self, start: int | None, predicate: Callable[[T], bool]) -> int | None:
        """
        Scan toward the head from start (inclusive) for a matching value.

        Returns:
            Handle of the first match, None if the scan runs off the head
        """
        handle = start
        while handle is not None:
            slot = self._slots[handle]
            if predicate(slot.value):
                return handle
            handle = slot.prev
        return None

    def handles(self, reverse: bool = False) -> Iterator[int]:
        """Iterate handles head to tail (or tail to head when reverse)."""
        handle = self._tail if reverse else self._head
        while handle is not None:
            slot = self._slots[handle]
            yield handle
            handle = slot.prev if reverse else slot.next

    def values(self, reverse: bool = False) -> Iterator[T]:
        """Iterate values in list order."""
        for handle in self.handles(reverse=reverse):
            yield self._slots[handle].value

    def clear(self) -> None:
        """Drop every slot. Handles keep counting up."""
        for slot in self._slots.values():
            slot.prev = None
            slot.next = None
        self._slots.clear()
        self._head = None
        self._tail = None

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, handle: object) -> bool:
        return handle in self._slots

    def __iter__(self) -> Iterator[T]:
        return self.values()


__all__ = ["LinkedArena", "Slot"]
