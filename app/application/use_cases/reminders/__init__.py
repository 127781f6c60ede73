"""Reminder use cases: CRUD and the due-soon processing pass."""

from .manage import (
    create_reminder,
    delete_reminder,
    get_reminder,
    list_user_reminders,
    toggle_reminder,
    update_reminder,
)
from .process_due import (
    ReminderRunSummary,
    advance_after_fire,
    fire_reminder,
    process_due_reminders,
)
from .recurrence import next_occurrence

__all__ = [
    "create_reminder",
    "delete_reminder",
    "get_reminder",
    "list_user_reminders",
    "toggle_reminder",
    "update_reminder",
    "ReminderRunSummary",
    "advance_after_fire",
    "fire_reminder",
    "process_due_reminders",
    "next_occurrence",
]
