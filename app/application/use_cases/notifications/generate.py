"""Daily notification pass: retention sweep followed by inactivity scans."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.utils import ensure_app_timezone, now_in_app_timezone

from .cleanup import CleanupResult, cleanup_old_notifications
from .inactivity import InactivityCounts, generate_inactivity_notifications

logger = logging.getLogger(__name__)


class NotificationRunError(RuntimeError):
    """Raised when a full notification pass cannot complete."""


@dataclass
class NotificationRunSummary:
    """Aggregate counts reported by :func:`generate_all_notifications`."""

    cleanup: CleanupResult
    chat_notifications: InactivityCounts
    fundraiser_notifications: InactivityCounts
    timestamp: datetime
    errors: list[str] = field(default_factory=list)

    @property
    def total_generated(self) -> int:
        return (
            self.chat_notifications.total_generated
            + self.fundraiser_notifications.total_generated
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "cleanup": self.cleanup.to_dict(),
            "chat_notifications": self.chat_notifications.to_dict(),
            "fundraiser_notifications": self.fundraiser_notifications.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "errors": list(self.errors),
        }


def generate_all_notifications(
    session: Session, *, now: datetime | None = None
) -> NotificationRunSummary:
    """Run the sweep, then the chat and fundraiser inactivity scans.

    The sweep runs first so the pass never deletes what it is about to
    create. A sweep failure aborts the pass with :class:`NotificationRunError`;
    scan failures are collected in ``errors`` and the remaining scans still run.
    """

    current = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    logger.info("Starting notification pass at %s", current.isoformat())

    try:
        cleanup = cleanup_old_notifications(session, now=current)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Notification retention sweep failed")
        raise NotificationRunError("Failed to clean up old notifications") from exc

    chat_counts, chat_errors = generate_inactivity_notifications(
        session, is_gold=False, now=current
    )
    fundraiser_counts, fundraiser_errors = generate_inactivity_notifications(
        session, is_gold=True, now=current
    )

    summary = NotificationRunSummary(
        cleanup=cleanup,
        chat_notifications=chat_counts,
        fundraiser_notifications=fundraiser_counts,
        timestamp=current,
        errors=chat_errors + fundraiser_errors,
    )
    logger.info(
        "Notification pass finished: %s deleted, %s chat and %s fundraiser notifications",
        cleanup.deleted_count,
        chat_counts.total_generated,
        fundraiser_counts.total_generated,
    )
    return summary


__all__ = [
    "NotificationRunError",
    "NotificationRunSummary",
    "generate_all_notifications",
]
