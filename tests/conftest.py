"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Storage:
    Tests use InMemoryPreferenceStore unless they exercise the file store
    itself, in which case they write under tmp_path. Nothing touches the
    configured data/ directory.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from modules.backend.core.preferences import InMemoryPreferenceStore
from modules.backend.repositories.note import NoteRepository
from modules.backend.schemas.note import Note


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def memory_store() -> InMemoryPreferenceStore:
    """Empty in-memory preference store."""
    return InMemoryPreferenceStore()


@pytest.fixture
def note_repository(memory_store: InMemoryPreferenceStore) -> NoteRepository:
    """Repository writing to the in-memory store under the default key."""
    return NoteRepository(memory_store)


# =============================================================================
# Note Fixtures
# =============================================================================


@pytest.fixture
def make_note() -> Callable[..., Note]:
    """
    Factory for notes with explicit fields.

    Usage:
        def test_sort(make_note):
            note = make_note("Taxes", date=datetime(2026, 4, 1))
    """

    def _make(
        title: str = "Untitled",
        content: str = "",
        date: datetime | None = None,
        reminder_date: datetime | None = None,
    ) -> Note:
        fields: dict[str, Any] = {
            "title": title,
            "content": content,
            "reminder_date": reminder_date,
        }
        if date is not None:
            fields["date"] = date
        return Note(**fields)

    return _make
