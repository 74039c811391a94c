"""
Id suppliers for new records.

Structures never generate ids themselves: they draw them from an injected
IdSupplier. Collisions against live records are detected by the structure
and reported as DuplicateIdError; suppliers are not asked to retry.

Usage:
    supplier: IdSupplier = CounterIdSupplier(prefix="A-", width=3)
    supplier.next_id()  # "A-001"
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import count
import logging
import time
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from uuid import uuid4

from bulletin.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from bulletin.core.config import BulletinConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class IdSupplier(Protocol):
    """
    Protocol for unique id suppliers.

    Example:
        >>> class FixedIds:
        ...     def __init__(self, ids):
        ...         self._ids = iter(ids)
        ...     def next_id(self) -> str:
        ...         return next(self._ids)
        >>>
        >>> supplier: IdSupplier = FixedIds(["a", "b"])
    """

    def next_id(self) -> str:
        """Return a new id string."""
        ...


class CounterIdSupplier:
    """Monotonic counter ids: deterministic, never repeats within one supplier."""

    def __init__(self, prefix: str = "", start: int = 1, width: int = 0):
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        self._prefix = prefix
        self._width = width
        self._counter = count(start)

    def next_id(self) -> str:
        return f"{self._prefix}{next(self._counter):0{self._width}d}"


class UuidIdSupplier:
    """Random ids built from uuid4 hex, e.g. ``rec_3f2a9c0d41be``."""

    def __init__(self, prefix: str = "rec_", length: int = 12):
        if not 4 <= length <= 32:
            raise ValueError(f"length must be in [4, 32], got {length}")
        self._prefix = prefix
        self._length = length

    def next_id(self) -> str:
        return f"{self._prefix}{uuid4().hex[: self._length]}"


class ClockIdSupplier:
    """
    Wall-clock ids: current time in milliseconds modulo 10**digits, zero-padded.

    Two calls inside the same millisecond return the same id, and ids wrap
    every 10**digits milliseconds. Structures reject such collisions with
    DuplicateIdError.
    """

    def __init__(self, clock: Callable[[], float] = time.time, digits: int = 6):
        if digits < 1:
            raise ValueError(f"digits must be >= 1, got {digits}")
        self._clock = clock
        self._digits = digits

    def next_id(self) -> str:
        ms = int(self._clock() * 1000)
        return str(ms % 10**self._digits).zfill(self._digits)


def build_id_supplier(config: BulletinConfig) -> IdSupplier:
    """
    Build the id supplier selected by configuration.

    Args:
        config: Bulletin configuration

    Returns:
        IdSupplier instance

    Raises:
        ConfigurationError: If config.id_strategy is unknown
    """
    strategy = config.id_strategy
    if strategy == "counter":
        supplier: IdSupplier = CounterIdSupplier(prefix=config.id_prefix, width=config.id_width)
    elif strategy == "uuid":
        supplier = UuidIdSupplier(prefix=config.id_prefix, length=config.uuid_length)
    elif strategy == "clock":
        supplier = ClockIdSupplier(digits=config.clock_digits)
    else:
        raise ConfigurationError(f"Unknown id strategy: {strategy!r}")

    logger.debug(f"Built {type(supplier).__name__} for id_strategy={strategy!r}")
    return supplier


__all__ = [
    "ClockIdSupplier",
    "CounterIdSupplier",
    "IdSupplier",
    "UuidIdSupplier",
    "build_id_supplier",
]
