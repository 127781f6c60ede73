"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities import NOTIFICATION_TYPES


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    chat_id: int | None = None
    notification_type: str
    title: str
    message: str
    chat_name: str | None = None
    message_count: int = 0
    days_inactive: int = 0
    last_activity_date: datetime | None = None
    is_read: bool = False
    is_sent: bool = False
    created_at: datetime
    sent_at: datetime | None = None


class NotificationList(BaseModel):
    notifications: list[NotificationRead]
    count: int


class NotificationStatsRead(BaseModel):
    total: int
    unread: int
    read: int


class NotificationCreate(BaseModel):
    """Payload used by administrators to create a notification by hand."""

    user_id: int
    notification_type: str
    title: str = Field(..., min_length=1, max_length=510)
    message: str = Field(..., min_length=1)
    chat_id: int | None = None
    chat_name: str | None = Field(default=None, max_length=255)
    message_count: int = Field(default=0, ge=0)
    days_inactive: int = Field(default=0, ge=0)
    last_activity_date: datetime | None = None
    is_read: bool = False
    is_sent: bool = False

    @field_validator("notification_type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        if value not in NOTIFICATION_TYPES:
            raise ValueError(f"notification_type must be one of: {', '.join(NOTIFICATION_TYPES)}")
        return value


class CleanupRead(BaseModel):
    deleted_count: int


class InactivityCountsRead(BaseModel):
    two_day_count: int
    five_day_count: int
    total_generated: int


class NotificationRunRead(BaseModel):
    """Summary of a full notification pass."""

    cleanup: CleanupRead
    chat_notifications: InactivityCountsRead
    fundraiser_notifications: InactivityCountsRead
    timestamp: datetime
    errors: list[str] = Field(default_factory=list)


class NotificationHealthRead(BaseModel):
    status: str
    checked_at: datetime
    next_run: str
    reminder_interval_minutes: int
    message: str


__all__ = [
    "CleanupRead",
    "InactivityCountsRead",
    "NotificationCreate",
    "NotificationHealthRead",
    "NotificationList",
    "NotificationRead",
    "NotificationRunRead",
    "NotificationStatsRead",
]
