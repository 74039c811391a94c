"""
Bulletin - in-memory announcement and event lists.

Main Features:
- One doubly linked list holding announcements and events together
- FIFO queue view over the event records of that same list
- Injected id suppliers (counter, uuid, wall clock)
- Simple announcement board and user directory lists

Quick Start:
    >>> from bulletin import HybridStructure
    >>> board = HybridStructure()
    >>> board.add_announcement("Exam schedule", "2024-01-01", "Admin")
    '1'
    >>> board.enqueue_event("Sports Day", "2024-02-01", "Admin")
    '2'
    >>> board.dequeue_event().title
    'Sports Day'

Architecture:
    Caller → HybridStructure → LinkedArena[Record]
                    ↳ event_front / event_rear handles
"""

__version__ = "0.1.0"

from bulletin.boards import AnnouncementBoard, UserDirectory
from bulletin.core.config import BulletinConfig
from bulletin.core.exceptions import (
    BulletinError,
    DuplicateIdError,
    EmptyQueueError,
    RecordNotFoundError,
    ValidationError,
)
from bulletin.core.hybrid import HybridStructure
from bulletin.core.records import Record, RecordKind
from bulletin.core.synchronized import SynchronizedHybridStructure

__all__ = [
    "AnnouncementBoard",
    "BulletinConfig",
    "BulletinError",
    "DuplicateIdError",
    "EmptyQueueError",
    "HybridStructure",
    "Record",
    "RecordKind",
    "RecordNotFoundError",
    "SynchronizedHybridStructure",
    "UserDirectory",
    "ValidationError",
    "__version__",
]
