"""
Notification Schemas.

A reminder registration as handed to the notification center: an
identifier, the displayed content, and a one-shot calendar trigger.
"""

from datetime import datetime, timezone, tzinfo

from pydantic import BaseModel, ConfigDict, Field


class CalendarTrigger(BaseModel):
    """Fires when the wall clock matches these fields. Seconds are ignored."""

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    repeats: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def matching(cls, when: datetime, repeats: bool = False) -> "CalendarTrigger":
        """Build a trigger from the calendar fields of an aware or naive datetime."""
        return cls(
            year=when.year,
            month=when.month,
            day=when.day,
            hour=when.hour,
            minute=when.minute,
            repeats=repeats,
        )

    def fire_date(self, tz: tzinfo | None = None) -> datetime:
        """
        Resolve the trigger to naive UTC.

        Args:
            tz: Timezone the calendar fields are expressed in, None for
                system local time
        """
        local = datetime(self.year, self.month, self.day, self.hour, self.minute)
        local = local.replace(tzinfo=tz) if tz is not None else local.astimezone()
        return local.astimezone(timezone.utc).replace(tzinfo=None)


class NotificationContent(BaseModel):
    title: str
    body: str
    sound: str = "default"


class NotificationRequest(BaseModel):
    """A pending notification, replaced wholesale when re-added under the same identifier."""

    identifier: str
    content: NotificationContent
    trigger: CalendarTrigger
