"""
Edit Session.

State for editing one note, new or existing. The reminder picker
visibility and the draft reminder date live here, per session, so two
sessions never share them.
"""

from datetime import datetime

from modules.backend.core.exceptions import NotFoundError, ValidationError
from modules.backend.core.utils import utc_now
from modules.backend.schemas.note import Note
from modules.backend.services.note import NoteService


class EditSession:
    """
    Draft of a note being edited.

    Usage:
        session = EditSession(service)            # new note
        session = EditSession(service, note)      # existing note
        session.title = "Groceries"
        session.set_reminder(tomorrow_9am)
        note = session.save()
    """

    def __init__(self, service: NoteService, note: Note | None = None) -> None:
        self.service = service
        self.note = note
        self.title = note.title if note else ""
        self.content = note.content if note else ""
        self.reminder_date: datetime | None = note.reminder_date if note else None
        self.reminder_picker_visible = False

    @property
    def is_new(self) -> bool:
        return self.note is None

    def toggle_reminder_picker(self) -> bool:
        self.reminder_picker_visible = not self.reminder_picker_visible
        return self.reminder_picker_visible

    def set_reminder(self, when: datetime, now: datetime | None = None) -> None:
        """
        Set the draft reminder date.

        Args:
            when: Reminder time, naive UTC
            now: Reference time, defaults to the current UTC time

        Raises:
            ValidationError: If ``when`` is not strictly after ``now``
        """
        now = now if now is not None else utc_now()
        if when <= now:
            raise ValidationError(
                "Reminder must be in the future",
                details={"reminder_date": when.isoformat(), "now": now.isoformat()},
            )
        self.reminder_date = when

    def clear_reminder(self) -> None:
        self.reminder_date = None

    def save(self) -> Note:
        """
        Create or update the note from the draft.

        Raises:
            NotFoundError: If the edited note was deleted meanwhile
        """
        if self.note is None:
            self.note = self.service.create(self.title, self.content, self.reminder_date)
            return self.note

        updated = self.service.update(self.note.id, self.title, self.content, self.reminder_date)
        if updated is None:
            raise NotFoundError(f"Note {self.note.id} no longer exists")
        self.note = updated
        return updated
