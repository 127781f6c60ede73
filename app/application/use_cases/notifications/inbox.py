"""Use cases for reading and managing stored notifications."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Notification, is_valid_notification_type
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone


@dataclass
class NotificationStats:
    total: int
    unread: int

    @property
    def read(self) -> int:
        return self.total - self.unread


def list_user_notifications(
    session: Session, user_id: int, *, limit: int | None = 50
) -> list[Notification]:
    """Return the most recent notifications addressed to ``user_id``."""

    return list(NotificationRepository(session).list_for_user(user_id, limit=limit))


def list_all_notifications(
    session: Session,
    *,
    notification_type: str | None = None,
    is_read: bool | None = None,
    limit: int | None = None,
) -> list[Notification]:
    if notification_type is not None and not is_valid_notification_type(notification_type):
        raise ValueError(f"Unknown notification type '{notification_type}'")
    repository = NotificationRepository(session)
    return list(
        repository.list_all(notification_type=notification_type, is_read=is_read, limit=limit)
    )


def get_notification_stats(session: Session, user_id: int) -> NotificationStats:
    total, unread = NotificationRepository(session).count_for_user(user_id)
    return NotificationStats(total=total, unread=unread)


def mark_notification_read(session: Session, notification_id: int, *, user_id: int) -> Notification:
    """Flag a notification as read or raise if the user does not own it."""

    notification = NotificationRepository(session).mark_as_read(notification_id, user_id=user_id)
    if notification is None:
        raise ValueError("Notification not found")
    return notification


def delete_notification(session: Session, notification_id: int) -> None:
    if not NotificationRepository(session).delete(notification_id):
        raise ValueError("Notification not found")


def create_notification(session: Session, notification: Notification) -> Notification:
    """Persist a notification supplied by an administrator."""

    if not is_valid_notification_type(notification.notification_type):
        raise ValueError(f"Unknown notification type '{notification.notification_type}'")
    if notification.created_at is None:
        notification.created_at = now_in_app_timezone()
    return NotificationRepository(session).create(notification)


__all__ = [
    "NotificationStats",
    "create_notification",
    "delete_notification",
    "get_notification_stats",
    "list_all_notifications",
    "list_user_notifications",
    "mark_notification_read",
]
