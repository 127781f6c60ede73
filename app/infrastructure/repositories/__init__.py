"""Repository implementations for infrastructure layer."""

from .chat_repository import ChatRepository
from .notification_repository import NotificationRepository
from .reminder_repository import ReminderRepository

__all__ = [
    "ChatRepository",
    "NotificationRepository",
    "ReminderRepository",
]
