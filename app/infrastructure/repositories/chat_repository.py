"""Persistence helpers for chat and fundraiser entities."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Chat
from app.infrastructure.models import ChatModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ChatRepository:
    """Read and touch :class:`Chat` rows for the notification engine."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, chat_id: int) -> Chat | None:
        model = self.session.get(ChatModel, chat_id)
        if model is None:
            return None
        return self._to_entity(model)

    def create(self, chat: Chat) -> Chat:
        model = ChatModel(
            user_id=chat.user_id,
            name=chat.name,
            last_activity=ensure_app_naive_datetime(chat.last_activity),
            is_gold=chat.is_gold,
            message_count=chat.message_count,
            created_at=ensure_app_naive_datetime(chat.created_at or now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_inactive_since(self, threshold: datetime, *, is_gold: bool) -> list[Chat]:
        """Return chats of one variant whose last activity is before ``threshold``."""

        query = (
            self.session.query(ChatModel)
            .filter(ChatModel.last_activity < ensure_app_naive_datetime(threshold))
            .filter(ChatModel.is_gold.is_(is_gold))
            .order_by(ChatModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def touch_activity(
        self,
        chat_id: int,
        at: datetime,
        *,
        is_gold: bool | None = None,
    ) -> Chat | None:
        """Move ``last_activity`` forward to ``at`` and count the new message.

        ``last_activity`` never moves backwards. Returns ``None`` when the chat
        does not exist or does not match the requested variant.
        """

        query = self.session.query(ChatModel).filter(ChatModel.id == chat_id)
        if is_gold is not None:
            query = query.filter(ChatModel.is_gold.is_(is_gold))
        model = query.one_or_none()
        if model is None:
            return None

        touched_at = ensure_app_naive_datetime(at)
        if model.last_activity is None or touched_at > model.last_activity:
            model.last_activity = touched_at
        model.message_count = (model.message_count or 0) + 1
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ChatModel) -> Chat:
        return Chat(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            last_activity=ensure_app_timezone(model.last_activity),
            is_gold=bool(model.is_gold),
            message_count=model.message_count or 0,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ChatRepository"]
