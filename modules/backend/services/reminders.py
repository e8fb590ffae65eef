"""
Reminder Scheduler.

Turns a note's reminder date into a one-shot calendar notification and
hands it to the notification center. Registration is fire-and-forget:
failures are logged and never raised to the caller.

Deleting a note does not cancel its pending reminder. A reminder left
behind by a deleted note stays pending until it fires or is removed
through the notification center directly.
"""

from datetime import tzinfo

from modules.backend.core.logging import get_logger, log_with_source
from modules.backend.core.utils import to_display
from modules.backend.schemas.note import Note
from modules.backend.schemas.notification import (
    CalendarTrigger,
    NotificationContent,
    NotificationRequest,
)
from modules.backend.services.notifications import NotificationCenter

logger = get_logger(__name__)

DEFAULT_TITLE = "Note Reminder"
DEFAULT_BODY_TEMPLATE = "Don't forget about your note: {title}"


class ReminderScheduler:
    """
    Registers note reminders with a notification center.

    Args:
        center: Notification center receiving the requests
        title: Fixed notification title
        body_template: Body format string, ``{title}`` is the note title
        tz: Timezone whose calendar fields the trigger matches, None for
            system local time
    """

    def __init__(
        self,
        center: NotificationCenter,
        title: str = DEFAULT_TITLE,
        body_template: str = DEFAULT_BODY_TEMPLATE,
        tz: tzinfo | None = None,
    ) -> None:
        self.center = center
        self.title = title
        self.body_template = body_template
        self.tz = tz

    def build_request(self, note: Note) -> NotificationRequest:
        """Build the registration for a note that has a reminder date."""
        if note.reminder_date is None:
            raise ValueError("note has no reminder date")

        local = to_display(note.reminder_date, self.tz)
        return NotificationRequest(
            identifier=str(note.id),
            content=NotificationContent(
                title=self.title,
                body=self.body_template.format(title=note.title),
            ),
            trigger=CalendarTrigger.matching(local, repeats=False),
        )

    def schedule(self, note: Note) -> NotificationRequest | None:
        """
        Register the note's reminder, replacing any pending one for the same note.

        Returns:
            The registered request, or None when the note has no reminder,
            the reminder time has already passed, or registration failed
        """
        if note.reminder_date is None:
            return None

        try:
            request = self.build_request(note)
            registered = self.center.add(request)
        except Exception as e:
            log_with_source(
                logger, "reminders", "warning", "Reminder registration failed",
                identifier=str(note.id), error=str(e),
            )
            return None

        if not registered:
            logger.debug("Reminder time has passed, not scheduled", identifier=request.identifier)
            return None

        logger.info("Reminder scheduled", identifier=request.identifier, trigger=request.trigger.model_dump())
        return request
