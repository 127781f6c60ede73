"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_all(
        self,
        *,
        notification_type: str | None = None,
        is_read: bool | None = None,
        limit: int | None = None,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        if notification_type is not None:
            query = query.filter(NotificationModel.notification_type == notification_type)
        if is_read is not None:
            query = query.filter(NotificationModel.is_read.is_(is_read))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_for_user(self, user_id: int) -> tuple[int, int]:
        """Return ``(total, unread)`` notification counts for ``user_id``."""

        total = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .scalar()
        )
        unread = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .scalar()
        )
        return int(total or 0), int(unread or 0)

    def count_for_chat_since(
        self, chat_id: int, notification_type: str, since: datetime
    ) -> int:
        """Count notifications of one kind for ``chat_id`` created at or after ``since``."""

        count = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.chat_id == chat_id)
            .filter(NotificationModel.notification_type == notification_type)
            .filter(NotificationModel.created_at >= ensure_app_naive_datetime(since))
            .scalar()
        )
        return int(count or 0)

    def create(self, notification: Notification, *, commit: bool = True) -> Notification:
        """Persist ``notification``.

        With ``commit=False`` the row is only flushed so the caller can group
        it with other writes in a single transaction.
        """

        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .one_or_none()
        )
        if model is None:
            return None
        model.is_read = True
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, notification_id: int) -> bool:
        """Delete a notification by id; ``False`` when it does not exist."""

        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def delete_created_before(self, instant: datetime) -> int:
        """Bulk delete notifications created strictly before ``instant``."""

        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.created_at < ensure_app_naive_datetime(instant))
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return int(deleted or 0)

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.chat_id = notification.chat_id
        model.user_id = notification.user_id
        model.notification_type = notification.notification_type
        model.title = notification.title
        model.message = notification.message
        model.chat_name = notification.chat_name
        model.message_count = notification.message_count
        model.days_inactive = notification.days_inactive
        model.last_activity_date = ensure_app_naive_datetime(notification.last_activity_date)
        model.is_read = notification.is_read
        model.is_sent = notification.is_sent
        model.sent_at = ensure_app_naive_datetime(notification.sent_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            notification_type=model.notification_type,
            title=model.title,
            message=model.message,
            chat_id=model.chat_id,
            chat_name=model.chat_name,
            message_count=model.message_count or 0,
            days_inactive=model.days_inactive or 0,
            last_activity_date=ensure_app_timezone(model.last_activity_date),
            is_read=bool(model.is_read),
            is_sent=bool(model.is_sent),
            created_at=ensure_app_timezone(model.created_at),
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["NotificationRepository"]
