"""
Note Service.

Owns the in-memory note collection. Every mutation rewrites the whole
stored collection through the repository before returning; saves that
carry a reminder date also register the reminder.

Deletion is by position in the displayed view, which depends on the
service's current sort option and search text. Positions are resolved to
note ids before anything is removed.
"""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from modules.backend.repositories.note import NoteRepository
from modules.backend.schemas.note import Note, SortOption
from modules.backend.services.base import BaseService
from modules.backend.services.reminders import ReminderScheduler
from modules.backend.services.view import derive_view


class NoteService(BaseService):
    """
    Controller for the note collection.

    The collection is loaded from the repository on construction.

    Args:
        repository: Persistence for the collection
        reminders: Scheduler for note reminders; None disables scheduling
        sort_option: Initial ordering of the displayed view
    """

    def __init__(
        self,
        repository: NoteRepository,
        reminders: ReminderScheduler | None = None,
        sort_option: SortOption | str = SortOption.TITLE,
    ) -> None:
        super().__init__()
        self.repo = repository
        self.reminders = reminders
        self.sort_option = SortOption(sort_option)
        self.search_text = ""
        self._notes: list[Note] = self.repo.load()

    @property
    def notes(self) -> list[Note]:
        """Collection in storage order (a copy)."""
        return list(self._notes)

    def displayed(self) -> list[Note]:
        """The sorted and filtered view for the current view state."""
        return derive_view(self._notes, self.sort_option, self.search_text)

    def get(self, note_id: UUID | str) -> Note | None:
        try:
            note_id = UUID(str(note_id))
        except ValueError:
            return None
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def create(
        self,
        title: str,
        content: str,
        reminder_date: datetime | None = None,
    ) -> Note:
        """
        Create a note dated now and append it to the collection.

        Args:
            title: Note title
            content: Note body
            reminder_date: Optional reminder time (naive UTC)

        Returns:
            The created note
        """
        note = Note(title=title, content=content, reminder_date=reminder_date)
        self._notes.append(note)
        self._log_operation("Creating note", note_id=str(note.id))
        self._persist()
        self._schedule(note)
        return note

    def update(
        self,
        note_id: UUID | str,
        title: str,
        content: str,
        reminder_date: datetime | None,
    ) -> Note | None:
        """
        Replace a note's editable fields, keeping its id and creation date.

        Returns:
            The updated note, or None when no note has this id (nothing is
            changed or written in that case)
        """
        note = self.get(note_id)
        if note is None:
            self._log_debug("Update skipped, note not found", note_id=str(note_id))
            return None

        note.title = title
        note.content = content
        note.reminder_date = reminder_date
        self._log_operation("Updating note", note_id=str(note.id))
        self._persist()
        self._schedule(note)
        return note

    def delete(self, positions: Iterable[int]) -> list[Note]:
        """
        Delete notes at positions of the displayed view.

        Args:
            positions: Indexes into displayed(), not into storage order

        Returns:
            The removed notes, in displayed order

        Raises:
            ValidationError: If any position is outside the displayed view;
                nothing is removed in that case
        """
        positions = list(positions)
        view = self.displayed()
        self._validate_positions(positions, len(view))

        doomed = [view[p] for p in sorted(set(positions))]
        doomed_ids = {note.id for note in doomed}
        self._notes = [note for note in self._notes if note.id not in doomed_ids]

        self._log_operation(
            "Deleting notes",
            note_ids=[str(note.id) for note in doomed],
        )
        self._persist()
        return doomed

    def delete_by_id(self, note_id: UUID | str) -> bool:
        note = self.get(note_id)
        if note is None:
            return False
        self._notes = [n for n in self._notes if n.id != note.id]
        self._log_operation("Deleting note", note_id=str(note.id))
        self._persist()
        return True

    def _persist(self) -> None:
        self.repo.save(list(self._notes))

    def _schedule(self, note: Note) -> None:
        if self.reminders is not None:
            self.reminders.schedule(note)
