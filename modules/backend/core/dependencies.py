"""
Dependencies.

Builds the configured object graph: preference store, note repository,
notification center, reminder scheduler and note service.

Usage:
    from modules.backend.core.dependencies import get_note_service

    service = get_note_service()
    service.create("Groceries", "milk, eggs")
"""

from modules.backend.core.config import get_app_config, get_display_timezone
from modules.backend.core.logging import get_logger
from modules.backend.core.preferences import PreferenceStore, get_preference_store
from modules.backend.repositories.note import NoteRepository
from modules.backend.services.note import NoteService
from modules.backend.services.notifications import LocalNotificationCenter
from modules.backend.services.reminders import ReminderScheduler

logger = get_logger(__name__)


def get_notification_center(store: PreferenceStore | None = None) -> LocalNotificationCenter:
    """Notification center over the configured pending slot."""
    config = get_app_config().notifications
    return LocalNotificationCenter(
        store if store is not None else get_preference_store(),
        key=config.pending_key,
        tz=get_display_timezone(),
    )


def get_reminder_scheduler(store: PreferenceStore | None = None) -> ReminderScheduler:
    config = get_app_config().notifications
    return ReminderScheduler(
        get_notification_center(store),
        title=config.title,
        body_template=config.body_template,
        tz=get_display_timezone(),
    )


def get_note_service(store: PreferenceStore | None = None) -> NoteService:
    """
    Build a note service with its collection loaded from storage.

    Args:
        store: Preference store to use; the configured file store when None
    """
    store = store if store is not None else get_preference_store()
    app = get_app_config().application

    repository = NoteRepository(
        store,
        key=app.storage.notes_key,
        preserve_corrupt_blob=app.storage.preserve_corrupt_blob,
    )
    service = NoteService(
        repository,
        reminders=get_reminder_scheduler(store),
        sort_option=app.view.default_sort,
    )
    logger.debug("Note service ready", count=len(service.notes))
    return service
