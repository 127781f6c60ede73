"""CRUD use cases for user reminders."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import RECURRENCE_PATTERNS, Reminder
from app.infrastructure.repositories import ChatRepository, ReminderRepository
from app.utils import ensure_app_timezone

_UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "message",
        "reminder_time",
        "is_recurring",
        "recurrence_pattern",
        "is_active",
    }
)
_NON_NULLABLE_FIELDS = _UPDATABLE_FIELDS - {"recurrence_pattern"}


def _validate_recurrence(reminder: Reminder) -> None:
    if reminder.is_recurring and reminder.recurrence_pattern not in RECURRENCE_PATTERNS:
        raise ValueError("A valid recurrence pattern is required for recurring reminders")
    if (
        reminder.recurrence_pattern is not None
        and reminder.recurrence_pattern not in RECURRENCE_PATTERNS
    ):
        raise ValueError(f"Unknown recurrence pattern '{reminder.recurrence_pattern}'")


def create_reminder(session: Session, reminder: Reminder) -> Reminder:
    """Validate and persist a new reminder."""

    _validate_recurrence(reminder)
    if reminder.chat_id is not None and ChatRepository(session).get(reminder.chat_id) is None:
        raise ValueError("Chat not found")
    return ReminderRepository(session).create(reminder)


def list_user_reminders(session: Session, user_id: int) -> list[Reminder]:
    return list(ReminderRepository(session).list_for_user(user_id))


def get_reminder(session: Session, reminder_id: int, *, user_id: int) -> Reminder:
    reminder = ReminderRepository(session).get(reminder_id, user_id=user_id)
    if reminder is None:
        raise ValueError("Reminder not found")
    return reminder


def update_reminder(
    session: Session, reminder_id: int, *, user_id: int, changes: dict[str, Any]
) -> Reminder:
    """Apply ``changes`` to a reminder owned by ``user_id``.

    Moving ``reminder_time`` re-arms the reminder so it can fire again.
    """

    unknown = set(changes) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
    nulls = sorted(
        name for name in _NON_NULLABLE_FIELDS if name in changes and changes[name] is None
    )
    if nulls:
        raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")

    if changes.get("reminder_time") is not None:
        changes = {**changes, "reminder_time": ensure_app_timezone(changes["reminder_time"])}
    current = get_reminder(session, reminder_id, user_id=user_id)
    updated = replace(current, **changes)
    if "reminder_time" in changes and changes["reminder_time"] != current.reminder_time:
        updated = replace(updated, is_sent=False, sent_at=None)
    _validate_recurrence(updated)
    return ReminderRepository(session).update(updated)


def toggle_reminder(session: Session, reminder_id: int, *, user_id: int) -> Reminder:
    current = get_reminder(session, reminder_id, user_id=user_id)
    return ReminderRepository(session).update(replace(current, is_active=not current.is_active))


def delete_reminder(session: Session, reminder_id: int, *, user_id: int) -> None:
    if not ReminderRepository(session).delete(reminder_id, user_id=user_id):
        raise ValueError("Reminder not found")


__all__ = [
    "create_reminder",
    "delete_reminder",
    "get_reminder",
    "list_user_reminders",
    "toggle_reminder",
    "update_reminder",
]
