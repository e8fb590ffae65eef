"""
Notification Center.

Local stand-in for the operating system's notification scheduler. Pending
requests are keyed by identifier: adding a request whose identifier is
already pending replaces it. Delivery is driven from outside by calling
deliver_due() with the current time.

Usage:
    center = LocalNotificationCenter(store)
    center.add(request)
    for request in center.deliver_due(utc_now()):
        ...
"""

from datetime import datetime, tzinfo

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from modules.backend.core.exceptions import NotificationError, StorageError
from modules.backend.core.logging import get_logger, log_with_source
from modules.backend.core.preferences import PreferenceStore
from modules.backend.core.utils import utc_now
from modules.backend.schemas.notification import NotificationRequest

logger = get_logger(__name__)

DEFAULT_PENDING_KEY = "pending_notifications"

_requests_adapter = TypeAdapter(list[NotificationRequest])


class NotificationCenter:
    """
    Base class for notification centers.

    Subclasses own storage and delivery of pending requests.
    """

    def add(self, request: NotificationRequest, now: datetime | None = None) -> bool:
        raise NotImplementedError

    def remove(self, identifier: str) -> bool:
        raise NotImplementedError

    def pending(self) -> list[NotificationRequest]:
        raise NotImplementedError

    def deliver_due(self, now: datetime) -> list[NotificationRequest]:
        raise NotImplementedError


class LocalNotificationCenter(NotificationCenter):
    """
    Notification center persisted in a preference slot.

    Args:
        store: Preference store holding the pending list
        key: Slot name for the pending list
        tz: Timezone the calendar triggers are expressed in, None for
            system local time
    """

    def __init__(
        self,
        store: PreferenceStore,
        key: str = DEFAULT_PENDING_KEY,
        tz: tzinfo | None = None,
    ) -> None:
        self.store = store
        self.key = key
        self.tz = tz

    def _read(self) -> list[NotificationRequest]:
        try:
            blob = self.store.get(self.key)
        except StorageError as e:
            raise NotificationError(f"Cannot read pending notifications: {e.message}") from e
        if blob is None:
            return []
        try:
            return _requests_adapter.validate_json(blob)
        except PydanticValidationError as e:
            raise NotificationError(
                f"Pending notifications are unreadable: {e.error_count()} error(s)"
            ) from e

    def _write(self, requests: list[NotificationRequest]) -> None:
        blob = _requests_adapter.dump_json(requests).decode("utf-8")
        try:
            self.store.set(self.key, blob)
        except StorageError as e:
            raise NotificationError(f"Cannot store pending notifications: {e.message}") from e

    def add(self, request: NotificationRequest, now: datetime | None = None) -> bool:
        """
        Register a request, replacing any pending one with the same identifier.

        A one-shot trigger whose time has already passed can never match
        again, so it is not registered.

        Args:
            request: Request to register
            now: Reference time, naive UTC; defaults to the current time

        Returns:
            True if registered, False if the trigger time has passed

        Raises:
            NotificationError: If the pending list cannot be read or written
        """
        now = now if now is not None else utc_now()
        fire_date = request.trigger.fire_date(self.tz)
        if not request.trigger.repeats and fire_date <= now:
            logger.debug(
                "Notification not registered, trigger already passed",
                identifier=request.identifier,
                fire_date=fire_date.isoformat(),
            )
            return False

        requests = [r for r in self._read() if r.identifier != request.identifier]
        requests.append(request)
        self._write(requests)
        logger.debug(
            "Notification registered",
            identifier=request.identifier,
            fire_date=fire_date.isoformat(),
        )
        return True

    def remove(self, identifier: str) -> bool:
        requests = self._read()
        remaining = [r for r in requests if r.identifier != identifier]
        if len(remaining) == len(requests):
            return False
        self._write(remaining)
        return True

    def pending(self) -> list[NotificationRequest]:
        """Pending requests ordered by fire date."""
        return sorted(self._read(), key=lambda r: r.trigger.fire_date(self.tz))

    def deliver_due(self, now: datetime) -> list[NotificationRequest]:
        """
        Remove and return every request whose trigger time has been reached.

        Args:
            now: Current time, naive UTC
        """
        requests = self._read()
        due = [r for r in requests if r.trigger.fire_date(self.tz) <= now]
        if not due:
            return []

        self._write([r for r in requests if r not in due])
        for request in due:
            log_with_source(
                logger, "reminders", "info", "Notification delivered",
                identifier=request.identifier, title=request.content.title,
            )
        return sorted(due, key=lambda r: r.trigger.fire_date(self.tz))
