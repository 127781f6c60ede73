"""Schemas for reminder endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

RecurrencePattern = Literal["daily", "weekly", "monthly", "yearly"]


class ReminderCreate(BaseModel):
    """Payload to schedule a new reminder."""

    chat_id: int | None = None
    title: str = Field(..., min_length=1, max_length=500)
    message: str = Field(..., min_length=1)
    reminder_time: datetime
    is_recurring: bool = False
    recurrence_pattern: RecurrencePattern | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def _pattern_required_when_recurring(self) -> "ReminderCreate":
        if self.is_recurring and self.recurrence_pattern is None:
            raise ValueError("recurrence_pattern is required when is_recurring is true")
        return self


class ReminderUpdate(BaseModel):
    """Partial update; at least one field must be provided."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    message: str | None = Field(default=None, min_length=1)
    reminder_time: datetime | None = None
    is_recurring: bool | None = None
    recurrence_pattern: RecurrencePattern | None = None
    is_active: bool | None = None

    @field_validator("title", "message", "reminder_time", "is_recurring", "is_active")
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value

    @model_validator(mode="after")
    def _not_empty(self) -> "ReminderUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ReminderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    chat_id: int | None = None
    chat_name: str | None = None
    title: str
    message: str
    reminder_time: datetime
    is_recurring: bool
    recurrence_pattern: str | None = None
    is_active: bool
    is_sent: bool
    sent_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReminderList(BaseModel):
    reminders: list[ReminderRead]
    count: int


class ReminderRunRead(BaseModel):
    count: int
    processed_reminder_ids: list[int]
    notification_ids: list[int]
    skipped_reminder_ids: list[int]
    failed_reminder_ids: list[int]
    errors: list[str] = Field(default_factory=list)
    timestamp: datetime


__all__ = [
    "ReminderCreate",
    "ReminderList",
    "ReminderRead",
    "ReminderRunRead",
    "ReminderUpdate",
]
