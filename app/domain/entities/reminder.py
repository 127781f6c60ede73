"""Domain entity representing a scheduled reminder."""

from dataclasses import dataclass
from datetime import datetime

RECURRENCE_DAILY = "daily"
RECURRENCE_WEEKLY = "weekly"
RECURRENCE_MONTHLY = "monthly"
RECURRENCE_YEARLY = "yearly"

RECURRENCE_PATTERNS = (
    RECURRENCE_DAILY,
    RECURRENCE_WEEKLY,
    RECURRENCE_MONTHLY,
    RECURRENCE_YEARLY,
)


@dataclass
class Reminder:
    """Alert owned by a user, optionally tied to a chat.

    Recurring reminders are re-armed in place after every fire instead of
    being re-created, so the same row keeps advancing ``reminder_time``.
    """

    id: int | None
    user_id: int
    title: str
    message: str
    reminder_time: datetime
    chat_id: int | None = None
    chat_name: str | None = None
    is_recurring: bool = False
    recurrence_pattern: str | None = None
    is_active: bool = True
    is_sent: bool = False
    sent_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Reminder",
    "RECURRENCE_PATTERNS",
    "RECURRENCE_DAILY",
    "RECURRENCE_WEEKLY",
    "RECURRENCE_MONTHLY",
    "RECURRENCE_YEARLY",
]
