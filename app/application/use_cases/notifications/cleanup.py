"""Retention sweep for notifications from previous days."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRepository

from .windows import start_of_day

logger = logging.getLogger(__name__)


@dataclass
class CleanupResult:
    deleted_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"deleted_count": self.deleted_count}


def cleanup_old_notifications(session: Session, *, now: datetime) -> CleanupResult:
    """Delete every notification created before the start of ``now``'s day.

    Database errors propagate so the caller can fail the whole pass.
    """

    cutoff = start_of_day(now)
    deleted = NotificationRepository(session).delete_created_before(cutoff)
    logger.info("Removed %s notifications created before %s", deleted, cutoff.isoformat())
    return CleanupResult(deleted_count=deleted)


__all__ = ["CleanupResult", "cleanup_old_notifications"]
