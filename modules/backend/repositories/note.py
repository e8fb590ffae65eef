"""
Note Repository.

Persistence for the note collection. The whole ordered collection is
encoded as one JSON array and written to a single named slot of the
preference store; every save overwrites the previous blob.

Failures never reach the caller: encoding and write errors leave the
stored blob untouched, and an unreadable blob loads as an empty
collection. Both are reported through the module logger.
"""

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from modules.backend.core.exceptions import DecodingError, EncodingError, StorageError
from modules.backend.core.logging import get_logger, log_with_source
from modules.backend.core.preferences import PreferenceStore
from modules.backend.schemas.note import Note

logger = get_logger(__name__)

DEFAULT_NOTES_KEY = "notes"
CORRUPT_SUFFIX = ".corrupt"

_notes_adapter = TypeAdapter(list[Note])


def encode_notes(notes: list[Note]) -> str:
    """
    Serialize notes to the stored JSON format.

    Raises:
        EncodingError: If any note cannot be serialized
    """
    try:
        return _notes_adapter.dump_json(
            notes, by_alias=True, exclude_none=True,
        ).decode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError) as e:
        raise EncodingError(f"Cannot encode notes: {e}") from e


def decode_notes(blob: str) -> list[Note]:
    """
    Deserialize notes from the stored JSON format.

    Raises:
        DecodingError: If the blob is not valid JSON, does not match the
            note shape, or repeats an identifier
    """
    try:
        notes = _notes_adapter.validate_json(blob)
    except PydanticValidationError as e:
        raise DecodingError(f"Cannot decode notes: {e.error_count()} error(s)") from e

    if len({note.id for note in notes}) != len(notes):
        raise DecodingError("Cannot decode notes: duplicate note id")
    return notes


class NoteRepository:
    """
    Reads and writes the note collection in one preference slot.

    Usage:
        repo = NoteRepository(store)
        notes = repo.load()
        notes.append(Note(title="Groceries", content="milk"))
        repo.save(notes)
    """

    def __init__(
        self,
        store: PreferenceStore,
        key: str = DEFAULT_NOTES_KEY,
        preserve_corrupt_blob: bool = False,
    ) -> None:
        self.store = store
        self.key = key
        self.preserve_corrupt_blob = preserve_corrupt_blob

    @property
    def corrupt_key(self) -> str:
        return f"{self.key}{CORRUPT_SUFFIX}"

    def save(self, notes: list[Note]) -> bool:
        """
        Overwrite the stored blob with the full collection.

        Returns:
            True if the blob was written, False if encoding or writing failed
        """
        try:
            blob = encode_notes(notes)
            self.store.set(self.key, blob)
        except (EncodingError, StorageError) as e:
            log_with_source(
                logger, "storage", "error", "Error saving notes",
                key=self.key, code=e.code, error=e.message,
            )
            return False

        logger.debug("Notes saved", key=self.key, count=len(notes))
        return True

    def load(self) -> list[Note]:
        """
        Read the stored collection.

        An absent slot is an empty collection, not an error. A blob that
        cannot be decoded is reported and discarded.
        """
        try:
            blob = self.store.get(self.key)
        except StorageError as e:
            log_with_source(
                logger, "storage", "error", "Error loading notes",
                key=self.key, code=e.code, error=e.message,
            )
            return []

        if blob is None:
            return []

        try:
            notes = decode_notes(blob)
        except DecodingError as e:
            log_with_source(
                logger, "storage", "error", "Error decoding notes",
                key=self.key, code=e.code, error=e.message,
                preserved=self.preserve_corrupt_blob,
            )
            if self.preserve_corrupt_blob:
                self._preserve(blob)
            return []

        logger.debug("Notes loaded", key=self.key, count=len(notes))
        return notes

    def _preserve(self, blob: str) -> None:
        try:
            self.store.set(self.corrupt_key, blob)
        except StorageError as e:
            logger.warning("Could not preserve unreadable notes", key=self.corrupt_key, error=e.message)
