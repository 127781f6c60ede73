"""SQLAlchemy model for chats and fundraisers."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ChatModel(Base):
    """Database representation of a chat; ``is_gold`` rows are fundraisers."""

    __tablename__ = "chat"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    last_activity = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    is_gold = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    message_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ChatModel"]
