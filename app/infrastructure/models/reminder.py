"""SQLAlchemy model for user reminders."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ReminderModel(Base):
    """Database representation of a one-shot or recurring reminder."""

    __tablename__ = "reminder"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    chat_id = Column(Integer, ForeignKey("chat.id", ondelete="SET NULL"), nullable=True)
    title = Column(String(500), nullable=False)
    message = Column(Text, nullable=False)
    reminder_time = Column(DateTime(), nullable=False, index=True)
    is_recurring = Column(Boolean, nullable=False, default=False)
    recurrence_pattern = Column(String(20), nullable=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    is_sent = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    sent_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)

    chat = relationship("ChatModel", lazy="joined")


__all__ = ["ReminderModel"]
