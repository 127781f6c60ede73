"""Domain entity representing a chat or fundraiser conversation."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Chat:
    """Long-lived conversation tracked for inactivity.

    ``is_gold`` marks the fundraiser variant; ``last_activity`` only moves
    forward and is bumped whenever a message is appended.
    """

    id: int | None
    user_id: int
    name: str
    last_activity: datetime
    is_gold: bool = False
    message_count: int = 0
    created_at: datetime | None = None

    @property
    def is_fundraiser(self) -> bool:
        return self.is_gold


__all__ = ["Chat"]
