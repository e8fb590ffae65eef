"""
Unit Test Fixtures.

Fixtures for unit tests - collaborators are mocked or in-memory.
Unit tests should be fast and isolated, never touching the real data file.
"""

from unittest.mock import MagicMock

import pytest

from modules.backend.repositories.note import NoteRepository
from modules.backend.services.notifications import NotificationCenter
from modules.backend.services.reminders import ReminderScheduler


@pytest.fixture
def mock_repository() -> MagicMock:
    """
    Repository mock whose load() returns an empty collection.

    Usage:
        def test_create(mock_repository):
            service = NoteService(mock_repository)
            service.create("a", "b")
            mock_repository.save.assert_called_once()
    """
    repo = MagicMock(spec=NoteRepository)
    repo.load.return_value = []
    repo.save.return_value = True
    return repo


@pytest.fixture
def mock_scheduler() -> MagicMock:
    """Reminder scheduler mock."""
    return MagicMock(spec=ReminderScheduler)


@pytest.fixture
def mock_center() -> MagicMock:
    """Notification center mock."""
    return MagicMock(spec=NotificationCenter)


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("modules.backend.repositories.note.logger", mock_logger):
                # Test code that logs
                mock_logger.error.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
