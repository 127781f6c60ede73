"""Aggregate application use cases."""

from .notifications import generate_all_notifications
from .reminders import process_due_reminders

__all__ = [
    "generate_all_notifications",
    "process_due_reminders",
]
