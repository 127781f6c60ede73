"""Reset the inactivity clock when a message is appended to a chat."""

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Chat
from app.infrastructure.repositories import ChatRepository
from app.utils import now_in_app_timezone


def record_chat_activity(
    session: Session, chat_id: int, *, now: datetime | None = None
) -> Chat:
    """Bump ``last_activity`` for any chat, fundraisers included."""

    chat = ChatRepository(session).touch_activity(chat_id, now or now_in_app_timezone())
    if chat is None:
        raise ValueError("Chat not found")
    return chat


def record_fundraiser_activity(
    session: Session, fundraiser_id: int, *, now: datetime | None = None
) -> Chat:
    """Bump ``last_activity`` only when ``fundraiser_id`` is a fundraiser."""

    chat = ChatRepository(session).touch_activity(
        fundraiser_id, now or now_in_app_timezone(), is_gold=True
    )
    if chat is None:
        raise ValueError("Fundraiser not found")
    return chat
