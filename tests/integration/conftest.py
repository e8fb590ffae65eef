"""
Integration Test Fixtures.

Fixtures for integration tests - real services wired from configuration
over a preference file under tmp_path.
"""

from pathlib import Path

import pytest

from modules.backend.core.preferences import FilePreferenceStore


@pytest.fixture
def preference_file(tmp_path: Path) -> Path:
    """Path of a preference file that does not exist yet."""
    return tmp_path / "data" / "preferences.json"


@pytest.fixture
def file_store(preference_file: Path) -> FilePreferenceStore:
    """
    File-backed store on a fresh path.

    Usage:
        def test_restart(file_store, preference_file):
            get_note_service(file_store).create("a", "b")
            reopened = FilePreferenceStore(preference_file)
    """
    return FilePreferenceStore(preference_file)
