"""Tests for HybridStructure list and event queue operations."""

import pytest

from bulletin.core.exceptions import (
    DuplicateIdError,
    EmptyQueueError,
    RecordNotFoundError,
    ValidationError,
)
from bulletin.core.hybrid import HybridStructure
from bulletin.core.records import RecordKind

from .conftest import FixedIdSupplier


def ids_of(records):
    return [r.record_id for r in records]


class TestListOperations:
    def test_school_board_scenario(self, school_board):
        board, ids = school_board

        assert ids_of(board.list_all()) == [ids["A1"], ids["V1"], ids["A2"], ids["V2"]]
        assert ids_of(board.list_events()) == [ids["V1"], ids["V2"]]

        dequeued = board.dequeue_event()
        assert dequeued.record_id == ids["V1"]
        assert dequeued.title == "Sports Day"
        assert ids_of(board.list_events()) == [ids["V2"]]
        assert ids_of(board.list_all()) == [ids["A1"], ids["A2"], ids["V2"]]

    def test_insert_returns_supplier_ids(self):
        board = HybridStructure(id_supplier=FixedIdSupplier(["x", "y"]))
        assert board.add_announcement("t", "d", "a") == "x"
        assert board.enqueue_event("t", "d", "a") == "y"
        assert "x" in board and "y" in board

    def test_insert_accepts_kind_strings(self, structure):
        record_id = structure.insert("Event", "Open Day", "2024-05-01", "Admin")
        assert structure.find_by_id(record_id).kind is RecordKind.EVENT
        assert structure.peek_event().record_id == record_id

    def test_insert_rejects_unknown_kind(self, structure):
        with pytest.raises(ValidationError):
            structure.insert("memo", "t", "d", "a")
        assert len(structure) == 0

    @pytest.mark.parametrize("field", ["title", "date", "author"])
    def test_insert_rejects_blank_fields(self, structure, field):
        values = {"title": "t", "date": "d", "author": "a", field: "   "}
        with pytest.raises(ValidationError):
            structure.add_announcement(**values)
        assert structure.is_empty

    def test_blank_fields_allowed_when_validation_disabled(self):
        board = HybridStructure(validate_fields=False)
        board.add_announcement("", "", "")
        assert len(board) == 1

    def test_duplicate_id_is_rejected_without_mutation(self):
        board = HybridStructure(id_supplier=FixedIdSupplier(["a", "a", "b"]), check_invariants=True)
        board.enqueue_event("first", "d", "x")

        with pytest.raises(DuplicateIdError) as exc_info:
            board.enqueue_event("second", "d", "x")

        assert exc_info.value.record_id == "a"
        assert ids_of(board.list_all()) == ["a"]
        assert board.event_rear.record_id == "a"
        assert board.enqueue_event("third", "d", "x") == "b"

    def test_find_by_id(self, school_board):
        board, ids = school_board
        record = board.find_by_id(ids["A2"])
        assert record.title == "Library hours"
        assert record.author == "Librarian"
        assert record.kind is RecordKind.ANNOUNCEMENT

    def test_find_on_empty_structure(self, structure):
        with pytest.raises(RecordNotFoundError):
            structure.find_by_id("1")
        assert structure.is_empty

    def test_find_missing_id_does_not_mutate(self, school_board):
        board, _ = school_board
        before = ids_of(board.list_all())
        with pytest.raises(RecordNotFoundError) as exc_info:
            board.find_by_id("nope")
        assert exc_info.value.record_id == "nope"
        assert ids_of(board.list_all()) == before

    def test_not_found_is_a_key_error(self, structure):
        with pytest.raises(KeyError):
            structure.remove_by_id("missing")

    def test_update_overwrites_title_and_date(self, school_board):
        board, ids = school_board
        updated = board.update(ids["V1"], "Sports Week", "2024-02-05")

        assert updated.title == "Sports Week"
        assert updated.date == "2024-02-05"
        assert updated.kind is RecordKind.EVENT
        assert updated.author == "Admin"
        assert board.peek_event().title == "Sports Week"

    def test_update_missing_id(self, structure):
        with pytest.raises(RecordNotFoundError):
            structure.update("missing", "t", "d")

    def test_update_rejects_blank_title(self, school_board):
        board, ids = school_board
        with pytest.raises(ValidationError):
            board.update(ids["A1"], "", "2024-01-02")
        assert board.find_by_id(ids["A1"]).date == "2024-01-01"

    def test_snapshots_do_not_alias_the_list(self, school_board):
        board, ids = school_board
        snapshot = board.find_by_id(ids["A1"])
        snapshot.title = "changed"
        for record in board.list_all():
            record.title = "changed too"
        assert board.find_by_id(ids["A1"]).title == "Exam schedule"

    def test_list_all_is_restartable(self, school_board):
        board, _ = school_board
        assert ids_of(board.list_all()) == ids_of(board.list_all())
        assert ids_of(board) == ids_of(board.list_all())

    def test_remove_head_and_tail(self, school_board):
        board, ids = school_board
        removed = board.remove_by_id(ids["A1"])
        assert removed.title == "Exam schedule"
        board.remove_by_id(ids["V2"])
        assert ids_of(board.list_all()) == [ids["V1"], ids["A2"]]

    def test_remove_missing_id_does_not_mutate(self, school_board):
        board, _ = school_board
        before = board.stats()
        with pytest.raises(RecordNotFoundError):
            board.remove_by_id("missing")
        assert board.stats() == before

    def test_clear_releases_everything(self, school_board):
        board, ids = school_board
        board.clear()
        assert board.is_empty
        assert board.event_front is None and board.event_rear is None
        assert ids["A1"] not in board
        board.check_invariants()

    def test_stats(self, school_board):
        board, ids = school_board
        stats = board.stats()
        assert stats.total_records == 4
        assert stats.announcements == 2
        assert stats.events == 2
        assert stats.event_front_id == ids["V1"]
        assert stats.event_rear_id == ids["V2"]


class TestEventQueue:
    def test_enqueue_dequeue_round_trip(self, structure):
        structure.add_announcement("Notice", "2024-01-01", "Admin")
        event_id = structure.enqueue_event("Concert", "2024-04-01", "Music Dept")

        record = structure.dequeue_event()

        assert record.record_id == event_id
        assert record.title == "Concert"
        assert structure.event_count == 0

    def test_fifo_order(self, structure):
        e1 = structure.enqueue_event("E1", "d", "a")
        structure.add_announcement("A", "d", "a")
        e2 = structure.enqueue_event("E2", "d", "a")
        e3 = structure.enqueue_event("E3", "d", "a")

        dequeued = [structure.dequeue_event().record_id for _ in range(3)]

        assert dequeued == [e1, e2, e3]
        assert len(structure) == 1

    def test_dequeue_empty_queue(self, structure):
        structure.add_announcement("A", "d", "a")
        with pytest.raises(EmptyQueueError):
            structure.dequeue_event()
        assert len(structure) == 1

    def test_empty_queue_is_an_index_error(self, structure):
        with pytest.raises(IndexError):
            structure.peek_event()

    def test_peek_is_idempotent(self, school_board):
        board, ids = school_board
        events_before = ids_of(board.list_events())

        peeks = {board.peek_event().record_id for _ in range(5)}

        assert peeks == {ids["V1"]}
        assert ids_of(board.list_events()) == events_before
        assert len(board) == 4

    def test_remove_middle_event_keeps_front_and_rear(self, structure):
        e1 = structure.enqueue_event("E1", "d", "a")
        e2 = structure.enqueue_event("E2", "d", "a")
        e3 = structure.enqueue_event("E3", "d", "a")

        structure.remove_by_id(e2)

        assert structure.event_front.record_id == e1
        assert structure.event_rear.record_id == e3
        assert ids_of(structure.list_events()) == [e1, e3]

    def test_remove_sole_event_clears_both_ends(self, structure):
        structure.add_announcement("A", "d", "a")
        e1 = structure.enqueue_event("E1", "d", "a")

        structure.remove_by_id(e1)

        assert structure.event_front is None
        assert structure.event_rear is None
        with pytest.raises(EmptyQueueError):
            structure.peek_event()

    def test_remove_front_event_advances_front(self, structure):
        e1 = structure.enqueue_event("E1", "d", "a")
        structure.add_announcement("A", "d", "a")
        e2 = structure.enqueue_event("E2", "d", "a")

        structure.remove_by_id(e1)

        assert structure.peek_event().record_id == e2
        assert structure.event_rear.record_id == e2

    def test_remove_rear_event_moves_rear_backward(self, structure):
        e1 = structure.enqueue_event("E1", "d", "a")
        e2 = structure.enqueue_event("E2", "d", "a")
        structure.add_announcement("A", "d", "a")
        e3 = structure.enqueue_event("E3", "d", "a")
        structure.add_announcement("B", "d", "a")

        structure.remove_by_id(e3)
        assert structure.event_rear.record_id == e2

        structure.remove_by_id(e2)
        assert structure.event_front.record_id == e1
        assert structure.event_rear.record_id == e1

    def test_enqueue_after_queue_drained(self, structure):
        structure.enqueue_event("E1", "d", "a")
        structure.add_announcement("A", "d", "a")
        structure.dequeue_event()

        e2 = structure.enqueue_event("E2", "d", "a")

        assert structure.event_front.record_id == e2
        assert structure.event_rear.record_id == e2

    def test_announcements_never_enter_the_queue(self, structure):
        structure.add_announcement("A", "d", "a")
        structure.add_announcement("B", "d", "a")
        assert list(structure.list_events()) == []
        assert structure.event_front is None
