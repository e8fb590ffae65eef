"""
Preference Store.

Process-wide key-value store of text blobs. Each slot holds one opaque
string; callers own the encoding of what they put there.

Usage:
    from modules.backend.core.preferences import get_preference_store

    store = get_preference_store()
    store.set("notes", blob)
    blob = store.get("notes")  # None when the slot is absent
"""

import json
import os
import shutil
import tempfile
import threading
from functools import lru_cache
from pathlib import Path

from modules.backend.core.config import get_storage_path
from modules.backend.core.exceptions import StorageError
from modules.backend.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class PreferenceStore:
    """
    Base class for key-value preference stores.

    Subclasses implement get/set/remove. Values are always strings.
    """

    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryPreferenceStore(PreferenceStore):
    """Dictionary-backed store. Contents live as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class FilePreferenceStore(PreferenceStore):
    """
    Store backed by a single JSON object file.

    The file is read lazily on first access. Every write rewrites the whole
    file through a temporary file and os.replace, so readers never see a
    partially written file. Writes are serialized with a lock. A write over
    an unreadable file replaces it, keeping a copy next to it.

    Raises:
        StorageError: On read, if the file exists but is not a JSON object
            of strings; on write, if the file cannot be written
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._values: dict[str, str] | None = None

    def _data(self) -> dict[str, str]:
        if self._values is None:
            self._values = self._read()
        return self._values

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read preference file {self.path}: {e}") from e
        if not isinstance(raw, dict) or not all(isinstance(v, str) for v in raw.values()):
            raise StorageError(f"Preference file {self.path} is not a map of strings")
        return raw

    def _write(self, values: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(values, f, ensure_ascii=False, indent=2, sort_keys=True)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write preference file {self.path}: {e}") from e

        logger.debug("Preference file written", path=str(self.path), keys=len(values))

    def _data_for_write(self) -> dict[str, str]:
        """
        Current values as the base for a write.

        An unreadable file is copied to ``<name>.corrupt`` and replaced by
        the write rather than blocking every later write.
        """
        try:
            return dict(self._data())
        except StorageError as e:
            backup = self.path.with_name(f"{self.path.name}.corrupt")
            try:
                shutil.copyfile(self.path, backup)
            except OSError as copy_error:
                logger.warning(
                    "Could not copy unreadable preference file aside",
                    path=str(self.path), error=str(copy_error),
                )
                backup = None
            log_with_source(
                logger, "storage", "warning", "Replacing unreadable preference file",
                path=str(self.path), error=e.message,
                backup=str(backup) if backup else None,
            )
            return {}

    def get(self, key: str) -> str | None:
        return self._data().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            values = self._data_for_write()
            values[key] = value
            self._write(values)
            self._values = values

    def remove(self, key: str) -> None:
        with self._lock:
            values = self._data_for_write()
            if values.pop(key, None) is None:
                return
            self._write(values)
            self._values = values


@lru_cache
def get_preference_store() -> PreferenceStore:
    """Get the process-wide store at the configured path."""
    return FilePreferenceStore(get_storage_path())
