"""Timezone helpers shared by the models and the notification engine.

Rows are stored with naive timestamps expressed in the application timezone,
so "today" for the engine is always the calendar day in ``APP_TIMEZONE``.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "Asia/Kolkata"
_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone that defines calendar days for the engine.

    ``APP_TIMEZONE`` accepts an IANA name or a fixed ``UTC+05:30`` style
    offset; anything else falls back to ``Asia/Kolkata``.
    """

    configured = (get_settings().app_timezone or "").strip()
    return _resolve_timezone(configured or _DEFAULT_TIMEZONE)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current wall-clock time in the app timezone, as stored in the database."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the app timezone.

    Naive values come from the database and are taken to be app-local already.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` to the naive app-local form used by the columns."""

    localized = ensure_app_timezone(value)
    return None if localized is None else localized.replace(tzinfo=None)


def start_of_app_day(value: datetime) -> datetime:
    """Return midnight of ``value``'s calendar day in the app timezone."""

    localized = ensure_app_timezone(value)
    return localized.replace(hour=0, minute=0, second=0, microsecond=0)


def _resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    match = _FIXED_OFFSET.match(name)
    if match is None:
        return ZoneInfo(_DEFAULT_TIMEZONE)
    offset = timedelta(hours=int(match["hours"]), minutes=int(match["minutes"] or 0))
    return timezone(-offset if match["sign"] == "-" else offset)
