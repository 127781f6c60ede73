"""ORM models used by the application infrastructure."""

from .chat import ChatModel
from .notification import NotificationModel
from .reminder import ReminderModel

__all__ = [
    "ChatModel",
    "NotificationModel",
    "ReminderModel",
]
