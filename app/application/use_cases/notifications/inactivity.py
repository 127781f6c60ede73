"""Inactivity scans for chats and fundraisers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Chat
from app.infrastructure.repositories import ChatRepository, NotificationRepository

from .emitter import emit_inactivity_notification, inactivity_kind
from .windows import (
    FIVE_DAY_THRESHOLD,
    TWO_DAY_THRESHOLD,
    inactivity_window,
    start_of_day,
)

logger = logging.getLogger(__name__)


@dataclass
class InactivityCounts:
    """Notifications generated for one chat variant during a pass."""

    two_day_count: int = 0
    five_day_count: int = 0

    @property
    def total_generated(self) -> int:
        return self.two_day_count + self.five_day_count

    def add(self, days: int, count: int) -> None:
        if days == TWO_DAY_THRESHOLD:
            self.two_day_count += count
        elif days == FIVE_DAY_THRESHOLD:
            self.five_day_count += count

    def to_dict(self) -> dict[str, int]:
        return {
            "two_day_count": self.two_day_count,
            "five_day_count": self.five_day_count,
            "total_generated": self.total_generated,
        }


@dataclass
class ScanOutcome:
    """Result of a single threshold scan."""

    label: str
    days: int
    candidates: int = 0
    generated: int = 0
    skipped_duplicates: int = 0
    failed_writes: int = 0
    error: str | None = None
    notification_ids: list[int] = field(default_factory=list)


def notification_exists_today(
    session: Session, *, chat_id: int, notification_type: str, now: datetime
) -> bool:
    """Return ``True`` if ``chat_id`` already has a ``notification_type`` row today."""

    repository = NotificationRepository(session)
    return repository.count_for_chat_since(chat_id, notification_type, start_of_day(now)) > 0


def find_inactive_chats(
    session: Session, *, days: int, is_gold: bool, now: datetime
) -> list[Chat]:
    """Return chats of one variant idle for longer than ``days`` at ``now``."""

    window = inactivity_window(now, days)
    return ChatRepository(session).list_inactive_since(window.threshold, is_gold=is_gold)


def scan_inactive_chats(
    session: Session, *, days: int, is_gold: bool, now: datetime
) -> ScanOutcome:
    """Run one scan: find candidates, drop today's duplicates and emit the rest.

    A failing read aborts this scan only and is reported in ``error``; failing
    writes skip their candidate.
    """

    label = f"{'fundraiser' if is_gold else 'chat'}_{days}_day"
    outcome = ScanOutcome(label=label, days=days)
    kind = inactivity_kind(is_gold=is_gold, days=days)

    try:
        candidates = find_inactive_chats(session, days=days, is_gold=is_gold, now=now)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Inactivity scan %s could not read chats", label)
        outcome.error = f"{label}: {exc}"
        return outcome

    outcome.candidates = len(candidates)
    for chat in candidates:
        try:
            duplicate = notification_exists_today(
                session, chat_id=chat.id, notification_type=kind, now=now
            )
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception("Inactivity scan %s could not check duplicates", label)
            outcome.error = f"{label}: {exc}"
            return outcome

        if duplicate:
            outcome.skipped_duplicates += 1
            continue

        saved = emit_inactivity_notification(session, chat=chat, days=days, now=now)
        if saved is None:
            outcome.failed_writes += 1
            continue
        outcome.generated += 1
        if saved.id is not None:
            outcome.notification_ids.append(saved.id)

    logger.info(
        "Inactivity scan %s: %s candidates, %s generated, %s already notified today",
        label,
        outcome.candidates,
        outcome.generated,
        outcome.skipped_duplicates,
    )
    return outcome


def generate_inactivity_notifications(
    session: Session, *, is_gold: bool, now: datetime
) -> tuple[InactivityCounts, list[str]]:
    """Run the 2-day and 5-day scans for one chat variant.

    Returns the per-threshold counts and the errors of scans that aborted.
    """

    counts = InactivityCounts()
    errors: list[str] = []
    for days in (TWO_DAY_THRESHOLD, FIVE_DAY_THRESHOLD):
        outcome = scan_inactive_chats(session, days=days, is_gold=is_gold, now=now)
        counts.add(days, outcome.generated)
        if outcome.error:
            errors.append(outcome.error)
    return counts, errors


__all__ = [
    "InactivityCounts",
    "ScanOutcome",
    "find_inactive_chats",
    "generate_inactivity_notifications",
    "notification_exists_today",
    "scan_inactive_chats",
]
