"""Domain entities exposed by the application."""

from .chat import Chat
from .notification import (
    NOTIFICATION_CHAT_INACTIVE_2_DAYS,
    NOTIFICATION_CHAT_INACTIVE_5_DAYS,
    NOTIFICATION_CHAT_REMINDER,
    NOTIFICATION_FUNDRAISER_INACTIVE_2_DAYS,
    NOTIFICATION_FUNDRAISER_INACTIVE_5_DAYS,
    NOTIFICATION_STATUS_UPDATE,
    NOTIFICATION_SYSTEM_ALERT,
    NOTIFICATION_TYPES,
    NOTIFICATION_USER_REMINDER,
    Notification,
    is_valid_notification_type,
)
from .reminder import (
    RECURRENCE_DAILY,
    RECURRENCE_MONTHLY,
    RECURRENCE_PATTERNS,
    RECURRENCE_WEEKLY,
    RECURRENCE_YEARLY,
    Reminder,
)

__all__ = [
    "Chat",
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
    "Reminder",
    "RECURRENCE_PATTERNS",
    "RECURRENCE_DAILY",
    "RECURRENCE_WEEKLY",
    "RECURRENCE_MONTHLY",
    "RECURRENCE_YEARLY",
]
