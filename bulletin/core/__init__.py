"""Core module for bulletin - records, the hybrid list and its support code."""

from bulletin.core.config import BulletinConfig
from bulletin.core.exceptions import (
    BulletinError,
    ConfigurationError,
    DuplicateIdError,
    DuplicateUserError,
    EmptyQueueError,
    InvariantViolationError,
    RecordNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from bulletin.core.hybrid import HybridStructure
from bulletin.core.ids import (
    ClockIdSupplier,
    CounterIdSupplier,
    IdSupplier,
    UuidIdSupplier,
    build_id_supplier,
)
from bulletin.core.linked import LinkedArena
from bulletin.core.records import Record, RecordKind, StructureStats
from bulletin.core.synchronized import SynchronizedHybridStructure

__all__ = [
    "BulletinConfig",
    "BulletinError",
    "ClockIdSupplier",
    "ConfigurationError",
    "CounterIdSupplier",
    "DuplicateIdError",
    "DuplicateUserError",
    "EmptyQueueError",
    "HybridStructure",
    "IdSupplier",
    "InvariantViolationError",
    "LinkedArena",
    "Record",
    "RecordKind",
    "RecordNotFoundError",
    "StructureStats",
    "SynchronizedHybridStructure",
    "UserNotFoundError",
    "UuidIdSupplier",
    "ValidationError",
    "build_id_supplier",
]
