"""Pydantic models for records held by HybridStructure."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecordKind(str, Enum):
    """
    Record kinds.

    Only EVENT records take part in the event queue view; every other kind
    is a plain list entry.
    """

    ANNOUNCEMENT = "announcement"
    EVENT = "event"

    @classmethod
    def _missing_(cls, value: object) -> "RecordKind | None":
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return None


class Record(BaseModel):
    """
    A single announcement or event.

    record_id and kind are fixed at creation. title and date change only
    through HybridStructure.update().
    """

    record_id: str = Field(..., description="Unique id among live records")
    kind: RecordKind = Field(..., description="Record kind (announcement, event)")
    title: str = Field(..., description="Visible title")
    date: str = Field(..., description="Display date, never parsed")
    author: str = Field(..., description="Creator (e.g. Admin, Teacher)")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "record_id": "000042",
                "kind": "event",
                "title": "Sports Day",
                "date": "2024-02-01",
                "author": "Admin",
            }
        }
    )

    @property
    def is_event(self) -> bool:
        return self.kind is RecordKind.EVENT

    def summary(self) -> str:
        """One-line rendering: ``[id] title by author on date``."""
        return f"[{self.record_id}] {self.title} by {self.author} on {self.date}"


class StructureStats(BaseModel):
    """Statistics about a HybridStructure."""

    total_records: int = Field(default=0, description="Total number of records")
    announcements: int = Field(default=0, description="Number of announcement records")
    events: int = Field(default=0, description="Number of event records")
    event_front_id: str | None = Field(default=None, description="Id of the oldest event")
    event_rear_id: str | None = Field(default=None, description="Id of the newest event")
