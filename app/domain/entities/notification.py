"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_CHAT_INACTIVE_2_DAYS = "chat_inactive_2days"
# The 5-day kinds keep their historical "4days" label so stored rows stay valid.
NOTIFICATION_CHAT_INACTIVE_5_DAYS = "chat_inactive_4days"
NOTIFICATION_FUNDRAISER_INACTIVE_2_DAYS = "fundraiser_inactive_2days"
NOTIFICATION_FUNDRAISER_INACTIVE_5_DAYS = "fundraiser_inactive_4days"
NOTIFICATION_CHAT_REMINDER = "chat_reminder"
NOTIFICATION_USER_REMINDER = "user_reminder"
NOTIFICATION_SYSTEM_ALERT = "system_alert"
NOTIFICATION_STATUS_UPDATE = "status_update"

NOTIFICATION_TYPES: tuple[str, ...] = (
    NOTIFICATION_CHAT_INACTIVE_2_DAYS,
    NOTIFICATION_CHAT_INACTIVE_5_DAYS,
    NOTIFICATION_FUNDRAISER_INACTIVE_2_DAYS,
    NOTIFICATION_FUNDRAISER_INACTIVE_5_DAYS,
    NOTIFICATION_CHAT_REMINDER,
    NOTIFICATION_USER_REMINDER,
    NOTIFICATION_SYSTEM_ALERT,
    NOTIFICATION_STATUS_UPDATE,
)


def is_valid_notification_type(value: str | None) -> bool:
    """Return ``True`` when ``value`` belongs to the fixed kind enumeration."""

    return value in NOTIFICATION_TYPES


@dataclass
class Notification:
    """Message addressed to a user, optionally about a specific chat."""

    id: int | None
    user_id: int
    notification_type: str
    title: str
    message: str
    chat_id: int | None = None
    chat_name: str | None = None
    message_count: int = 0
    days_inactive: int = 0
    last_activity_date: datetime | None = None
    is_read: bool = False
    is_sent: bool = False
    created_at: datetime | None = None
    sent_at: datetime | None = None


__all__ = [
    "Notification",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_CHAT_INACTIVE_2_DAYS",
    "NOTIFICATION_CHAT_INACTIVE_5_DAYS",
    "NOTIFICATION_FUNDRAISER_INACTIVE_2_DAYS",
    "NOTIFICATION_FUNDRAISER_INACTIVE_5_DAYS",
    "NOTIFICATION_CHAT_REMINDER",
    "NOTIFICATION_USER_REMINDER",
    "NOTIFICATION_SYSTEM_ALERT",
    "NOTIFICATION_STATUS_UPDATE",
    "is_valid_notification_type",
]
