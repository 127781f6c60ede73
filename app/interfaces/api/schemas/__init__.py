"""Pydantic schemas used by the HTTP interface."""

from .chat import ChatActivityRead
from .notification import (
    CleanupRead,
    InactivityCountsRead,
    NotificationCreate,
    NotificationHealthRead,
    NotificationList,
    NotificationRead,
    NotificationRunRead,
    NotificationStatsRead,
)
from .reminder import (
    ReminderCreate,
    ReminderList,
    ReminderRead,
    ReminderRunRead,
    ReminderUpdate,
)

__all__ = [
    "ChatActivityRead",
    "CleanupRead",
    "InactivityCountsRead",
    "NotificationCreate",
    "NotificationHealthRead",
    "NotificationList",
    "NotificationRead",
    "NotificationRunRead",
    "NotificationStatsRead",
    "ReminderCreate",
    "ReminderList",
    "ReminderRead",
    "ReminderRunRead",
    "ReminderUpdate",
]
