"""Persistence helpers for reminder entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Reminder
from app.infrastructure.models import ReminderModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ReminderRepository:
    """Provide CRUD operations and due-window lookups for reminders."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, reminder_id: int, *, user_id: int | None = None) -> Reminder | None:
        model = self._get_model(reminder_id, user_id=user_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_for_user(self, user_id: int) -> Sequence[Reminder]:
        query = (
            self.session.query(ReminderModel)
            .filter(ReminderModel.user_id == user_id)
            .order_by(ReminderModel.reminder_time.asc(), ReminderModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_due(self, window_start: datetime, window_end: datetime) -> Sequence[Reminder]:
        """Return armed reminders whose time falls inside ``[window_start, window_end]``."""

        query = (
            self.session.query(ReminderModel)
            .filter(ReminderModel.is_active.is_(True))
            .filter(ReminderModel.is_sent.is_(False))
            .filter(ReminderModel.reminder_time >= ensure_app_naive_datetime(window_start))
            .filter(ReminderModel.reminder_time <= ensure_app_naive_datetime(window_end))
            .order_by(ReminderModel.reminder_time.asc(), ReminderModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, reminder: Reminder) -> Reminder:
        model = ReminderModel(user_id=reminder.user_id)
        self._apply_entity_to_model(model, reminder)
        model.created_at = ensure_app_naive_datetime(
            reminder.created_at or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, reminder: Reminder, *, commit: bool = True) -> Reminder:
        if reminder.id is None:
            raise ValueError("Reminder id is required for updates")
        model = self.session.get(ReminderModel, reminder.id)
        if model is None:
            msg = f"Reminder with id {reminder.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, reminder)
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def delete(self, reminder_id: int, *, user_id: int | None = None) -> bool:
        model = self._get_model(reminder_id, user_id=user_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model(self, reminder_id: int, *, user_id: int | None) -> ReminderModel | None:
        query = self.session.query(ReminderModel).filter(ReminderModel.id == reminder_id)
        if user_id is not None:
            query = query.filter(ReminderModel.user_id == user_id)
        return query.one_or_none()

    @staticmethod
    def _apply_entity_to_model(model: ReminderModel, reminder: Reminder) -> None:
        model.user_id = reminder.user_id
        model.chat_id = reminder.chat_id
        model.title = reminder.title
        model.message = reminder.message
        model.reminder_time = ensure_app_naive_datetime(reminder.reminder_time)
        model.is_recurring = reminder.is_recurring
        model.recurrence_pattern = reminder.recurrence_pattern
        model.is_active = reminder.is_active
        model.is_sent = reminder.is_sent
        model.sent_at = ensure_app_naive_datetime(reminder.sent_at)

    @staticmethod
    def _to_entity(model: ReminderModel) -> Reminder:
        return Reminder(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            reminder_time=ensure_app_timezone(model.reminder_time),
            chat_id=model.chat_id,
            chat_name=model.chat.name if model.chat is not None else None,
            is_recurring=bool(model.is_recurring),
            recurrence_pattern=model.recurrence_pattern,
            is_active=bool(model.is_active),
            is_sent=bool(model.is_sent),
            sent_at=ensure_app_timezone(model.sent_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ReminderRepository"]
