"""
Note Schemas.

The note record and the sort options of the displayed view.
The JSON shape produced here is the stored wire format:

    {"id": "<uuid>", "title": "...", "content": "...",
     "date": "2026-10-18T09:30:00", "reminderDate": "..."}

reminderDate is omitted entirely when the note has no reminder.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from modules.backend.core.utils import utc_now


class SortOption(str, Enum):
    """Ordering applied to the displayed view."""

    TITLE = "title"
    DATE = "date"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Note(BaseModel):
    """A user-authored note."""

    id: UUID = Field(
        default_factory=uuid4,
        frozen=True,
        description="Identity key, assigned once at creation",
    )
    title: str = Field(description="Note title")
    content: str = Field(description="Note body, may span lines")
    date: datetime = Field(
        default_factory=utc_now,
        frozen=True,
        description="Creation timestamp (naive UTC)",
    )
    reminder_date: datetime | None = Field(
        default=None,
        alias="reminderDate",
        description="Pending reminder time (naive UTC)",
    )

    model_config = ConfigDict(populate_by_name=True)

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
