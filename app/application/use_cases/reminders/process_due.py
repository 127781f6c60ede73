"""Fire reminders entering their due-soon window."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import stage_reminder_notification
from app.application.use_cases.notifications.windows import reminder_window
from app.domain.entities import Notification, Reminder
from app.infrastructure.repositories import ReminderRepository
from app.utils import ensure_app_timezone, now_in_app_timezone

from .recurrence import next_occurrence

logger = logging.getLogger(__name__)


@dataclass
class ReminderRunSummary:
    """Outcome of one reminder pass."""

    timestamp: datetime
    processed: list[Reminder] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.processed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "processed_reminder_ids": [reminder.id for reminder in self.processed],
            "notification_ids": [notification.id for notification in self.notifications],
            "skipped_reminder_ids": list(self.skipped),
            "failed_reminder_ids": list(self.failed),
            "errors": list(self.errors),
            "timestamp": self.timestamp.isoformat(),
        }


def advance_after_fire(reminder: Reminder, *, now: datetime) -> Reminder | None:
    """Return the reminder state that follows a successful fire.

    One-shot reminders stay sent. Recurring reminders step from their current
    ``reminder_time`` (not from ``now``) and are re-armed. ``None`` means the
    recurrence pattern is not recognized.
    """

    fired = replace(reminder, is_sent=True, sent_at=now)
    if not reminder.is_recurring:
        return fired

    upcoming = next_occurrence(reminder.reminder_time, reminder.recurrence_pattern)
    if upcoming is None:
        return None
    return replace(fired, reminder_time=upcoming, is_sent=False, sent_at=None)


def fire_reminder(
    session: Session, reminder: Reminder, *, now: datetime
) -> tuple[Reminder, Notification] | None:
    """Emit the notification and store the new reminder state in one commit.

    Returns ``None`` when the reminder is skipped because its recurrence
    pattern is unknown. Any failure propagates after rollback so nothing
    staged for this reminder leaks into a later commit.
    """

    updated = advance_after_fire(reminder, now=now)
    if updated is None:
        logger.warning(
            "Reminder %s has unknown recurrence pattern %r; leaving it unsent",
            reminder.id,
            reminder.recurrence_pattern,
        )
        return None

    try:
        notification = stage_reminder_notification(session, reminder=reminder, now=now)
        saved = ReminderRepository(session).update(updated, commit=False)
        session.commit()
    except Exception:
        session.rollback()
        raise
    return saved, notification


def process_due_reminders(
    session: Session, *, now: datetime | None = None
) -> ReminderRunSummary:
    """Fire every armed reminder due within the next five minutes.

    Each reminder is handled in its own transaction, so one failure leaves
    the others untouched. A failing read is logged and reported in ``errors``.
    """

    current = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    summary = ReminderRunSummary(timestamp=current)
    window_start, window_end = reminder_window(current)

    try:
        due = ReminderRepository(session).list_due(window_start, window_end)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Could not load due reminders")
        summary.errors.append(f"due_reminders: {exc}")
        return summary

    for reminder in due:
        try:
            result = fire_reminder(session, reminder, now=current)
        except (SQLAlchemyError, ValueError):
            logger.exception("Failed to process reminder %s", reminder.id)
            summary.failed.append(reminder.id)
            continue
        if result is None:
            summary.skipped.append(reminder.id)
            continue
        saved, notification = result
        summary.processed.append(saved)
        summary.notifications.append(notification)

    if due:
        logger.info(
            "Reminder pass: %s due, %s fired, %s skipped, %s failed",
            len(due),
            summary.count,
            len(summary.skipped),
            len(summary.failed),
        )
    return summary


__all__ = [
    "ReminderRunSummary",
    "advance_after_fire",
    "fire_reminder",
    "process_due_reminders",
]
