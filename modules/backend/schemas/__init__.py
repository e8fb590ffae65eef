# Pydantic schemas package
from modules.backend.schemas.note import Note, SortOption
from modules.backend.schemas.notification import (
    CalendarTrigger,
    NotificationContent,
    NotificationRequest,
)

__all__ = [
    "CalendarTrigger",
    "Note",
    "NotificationContent",
    "NotificationRequest",
    "SortOption",
]
