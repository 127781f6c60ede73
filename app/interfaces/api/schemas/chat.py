"""Schemas for chat activity endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ChatActivityRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    last_activity: datetime
    is_gold: bool
    message_count: int


__all__ = ["ChatActivityRead"]
