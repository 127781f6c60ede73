"""Calendar-aware stepping for recurring reminders."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from app.domain.entities import (
    RECURRENCE_DAILY,
    RECURRENCE_MONTHLY,
    RECURRENCE_WEEKLY,
    RECURRENCE_YEARLY,
)


def _add_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    # Clamp to the last day so Jan 31 steps to Feb 28/29, not into March.
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def next_occurrence(current: datetime, pattern: str | None) -> datetime | None:
    """Return ``current`` advanced by one ``pattern`` unit.

    Months and years step on the calendar (same day next month/year); an
    unknown pattern yields ``None``.
    """

    if pattern == RECURRENCE_DAILY:
        return current + timedelta(days=1)
    if pattern == RECURRENCE_WEEKLY:
        return current + timedelta(days=7)
    if pattern == RECURRENCE_MONTHLY:
        return _add_months(current, 1)
    if pattern == RECURRENCE_YEARLY:
        return _add_months(current, 12)
    return None


__all__ = ["next_occurrence"]
