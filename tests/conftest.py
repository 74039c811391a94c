"""Shared fixtures for bulletin tests."""

import pytest

from bulletin.core.hybrid import HybridStructure
from bulletin.core.ids import CounterIdSupplier


class FixedIdSupplier:
    """Hands out a fixed sequence of ids."""

    def __init__(self, ids):
        self._ids = iter(ids)

    def next_id(self) -> str:
        return next(self._ids)


@pytest.fixture
def structure():
    """Empty structure that verifies its invariants after every mutation."""
    return HybridStructure(id_supplier=CounterIdSupplier(), check_invariants=True)


@pytest.fixture
def school_board(structure):
    """A1, V1, A2, V2 in that order; returns (structure, ids)."""
    ids = {
        "A1": structure.add_announcement("Exam schedule", "2024-01-01", "Admin"),
        "V1": structure.enqueue_event("Sports Day", "2024-02-01", "Admin"),
        "A2": structure.add_announcement("Library hours", "2024-01-15", "Librarian"),
        "V2": structure.enqueue_event("Science Fair", "2024-03-01", "Teacher"),
    }
    return structure, ids
