"""Pure time-window calculations for the notification engine.

Every helper takes ``now`` explicitly so passes can be replayed at any
instant in tests.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from app.utils import ensure_app_timezone, start_of_app_day

SECONDS_PER_DAY = 86400
TWO_DAY_THRESHOLD = 2
FIVE_DAY_THRESHOLD = 5
INACTIVITY_THRESHOLDS: tuple[int, ...] = (TWO_DAY_THRESHOLD, FIVE_DAY_THRESHOLD)
REMINDER_LOOKAHEAD = timedelta(minutes=5)


@dataclass(frozen=True)
class InactivityWindow:
    """Inactivity boundary for one threshold evaluated at a given instant.

    ``threshold`` is the raw cut-off used when scanning; ``day_start`` is the
    start of the current calendar day used to scope duplicate checks.
    """

    days: int
    threshold: datetime
    day_start: datetime


def start_of_day(now: datetime) -> datetime:
    """Return midnight of ``now``'s calendar day in the application timezone."""

    return start_of_app_day(now)


def inactivity_threshold(now: datetime, days: int) -> datetime:
    """Return the instant ``days`` whole days before ``now``."""

    return ensure_app_timezone(now) - timedelta(seconds=days * SECONDS_PER_DAY)


def inactivity_window(now: datetime, days: int) -> InactivityWindow:
    return InactivityWindow(
        days=days,
        threshold=inactivity_threshold(now, days),
        day_start=start_of_day(now),
    )


def inactivity_windows(now: datetime) -> tuple[InactivityWindow, ...]:
    """Return the 2-day and 5-day windows, in scan order."""

    return tuple(inactivity_window(now, days) for days in INACTIVITY_THRESHOLDS)


def reminder_window(now: datetime) -> tuple[datetime, datetime]:
    """Return the inclusive ``(start, end)`` due-soon window for reminders."""

    localized = ensure_app_timezone(now)
    return localized, localized + REMINDER_LOOKAHEAD


def minutes_until(now: datetime, due: datetime) -> int:
    """Whole minutes from ``now`` until ``due``, rounded up and never negative."""

    remaining = (ensure_app_timezone(due) - ensure_app_timezone(now)).total_seconds()
    return max(0, math.ceil(remaining / 60))


__all__ = [
    "FIVE_DAY_THRESHOLD",
    "INACTIVITY_THRESHOLDS",
    "InactivityWindow",
    "REMINDER_LOOKAHEAD",
    "TWO_DAY_THRESHOLD",
    "inactivity_threshold",
    "inactivity_window",
    "inactivity_windows",
    "minutes_until",
    "reminder_window",
    "start_of_day",
]
