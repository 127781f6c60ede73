"""Build and persist notification records for the engine."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_CHAT_INACTIVE_2_DAYS,
    NOTIFICATION_CHAT_INACTIVE_5_DAYS,
    NOTIFICATION_CHAT_REMINDER,
    NOTIFICATION_FUNDRAISER_INACTIVE_2_DAYS,
    NOTIFICATION_FUNDRAISER_INACTIVE_5_DAYS,
    NOTIFICATION_USER_REMINDER,
    Chat,
    Notification,
    Reminder,
)
from app.infrastructure.repositories import NotificationRepository

from .windows import FIVE_DAY_THRESHOLD, TWO_DAY_THRESHOLD, minutes_until

logger = logging.getLogger(__name__)

GENERAL_REMINDER_NAME = "General Reminder"
REMINDER_MARK = "⏰"

_INACTIVITY_KINDS: dict[tuple[bool, int], str] = {
    (False, TWO_DAY_THRESHOLD): NOTIFICATION_CHAT_INACTIVE_2_DAYS,
    (False, FIVE_DAY_THRESHOLD): NOTIFICATION_CHAT_INACTIVE_5_DAYS,
    (True, TWO_DAY_THRESHOLD): NOTIFICATION_FUNDRAISER_INACTIVE_2_DAYS,
    (True, FIVE_DAY_THRESHOLD): NOTIFICATION_FUNDRAISER_INACTIVE_5_DAYS,
}

_TITLES: dict[tuple[bool, int], str] = {
    (False, TWO_DAY_THRESHOLD): "Chat Inactive Alert",
    (False, FIVE_DAY_THRESHOLD): "Chat Action Required",
    (True, TWO_DAY_THRESHOLD): "Fundraiser Alert",
    (True, FIVE_DAY_THRESHOLD): "Fundraiser Action Required",
}


def inactivity_kind(*, is_gold: bool, days: int) -> str:
    """Return the notification kind for a chat variant and threshold."""

    try:
        return _INACTIVITY_KINDS[(is_gold, days)]
    except KeyError as exc:
        msg = f"No inactivity notification defined for {days} days"
        raise ValueError(msg) from exc


def _inactivity_message(chat: Chat, days: int) -> str:
    if chat.is_fundraiser:
        suffix = (
            "Don't lose momentum!" if days == TWO_DAY_THRESHOLD else "Immediate action required!"
        )
        return f'Your fundraiser "{chat.name}" has been inactive for {days} days. {suffix}'
    suffix = "Consider re-engaging!" if days == TWO_DAY_THRESHOLD else "Time to take action!"
    return f'Chat "{chat.name}" has been inactive for {days} days. {suffix}'


def build_inactivity_notification(chat: Chat, *, days: int, now: datetime) -> Notification:
    """Return the unsaved notification for ``chat`` crossing ``days`` of inactivity.

    ``days_inactive`` records the threshold that was crossed, not the live
    number of idle days.
    """

    key = (chat.is_gold, days)
    return Notification(
        id=None,
        user_id=chat.user_id,
        notification_type=inactivity_kind(is_gold=chat.is_gold, days=days),
        title=_TITLES[key],
        message=_inactivity_message(chat, days),
        chat_id=chat.id,
        chat_name=chat.name,
        message_count=chat.message_count,
        days_inactive=days,
        last_activity_date=chat.last_activity,
        is_read=False,
        is_sent=False,
        created_at=now,
    )


def build_reminder_notification(reminder: Reminder, *, now: datetime) -> Notification:
    """Return the unsaved pre-due notification for ``reminder``."""

    remaining = minutes_until(now, reminder.reminder_time)
    unit = "minute" if remaining == 1 else "minutes"
    return Notification(
        id=None,
        user_id=reminder.user_id,
        notification_type=(
            NOTIFICATION_CHAT_REMINDER if reminder.chat_id else NOTIFICATION_USER_REMINDER
        ),
        title=f"{REMINDER_MARK} {reminder.title}",
        message=f"{reminder.message}\n\n{REMINDER_MARK} Due in {remaining} {unit}",
        chat_id=reminder.chat_id,
        chat_name=reminder.chat_name or GENERAL_REMINDER_NAME,
        message_count=0,
        days_inactive=0,
        last_activity_date=now,
        is_read=False,
        is_sent=False,
        created_at=now,
    )


def emit_inactivity_notification(
    session: Session, *, chat: Chat, days: int, now: datetime
) -> Notification | None:
    """Persist one inactivity notification in its own transaction.

    A write failure is logged and rolled back; ``None`` tells the caller the
    candidate was skipped.
    """

    notification = build_inactivity_notification(chat, days=days, now=now)
    try:
        return NotificationRepository(session).create(notification)
    except SQLAlchemyError:
        session.rollback()
        logger.exception(
            "Failed to store %s notification for chat %s",
            notification.notification_type,
            chat.id,
        )
        return None


def stage_reminder_notification(
    session: Session, *, reminder: Reminder, now: datetime
) -> Notification:
    """Add the reminder notification to the caller's open transaction."""

    notification = build_reminder_notification(reminder, now=now)
    return NotificationRepository(session).create(notification, commit=False)


__all__ = [
    "GENERAL_REMINDER_NAME",
    "build_inactivity_notification",
    "build_reminder_notification",
    "emit_inactivity_notification",
    "inactivity_kind",
    "stage_reminder_notification",
]
