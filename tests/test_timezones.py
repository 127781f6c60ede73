"""Day boundaries when the application day differs from the UTC day."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from app.application.use_cases.notifications import (
    cleanup_old_notifications,
    notification_exists_today,
    scan_inactive_chats,
)
from app.application.use_cases.notifications.windows import start_of_day
from app.config import reset_settings_cache
from app.domain.entities import NOTIFICATION_CHAT_INACTIVE_2_DAYS, Notification
from app.infrastructure.repositories import NotificationRepository
from app.utils import get_app_timezone

# 20:00 UTC on March 15 is already 01:30 on March 16 in India.
EVENING_UTC = datetime(2024, 3, 15, 20, 0, tzinfo=timezone.utc)
BEFORE_IST_MIDNIGHT = datetime(2024, 3, 15, 18, 0, tzinfo=timezone.utc)
AFTER_IST_MIDNIGHT = datetime(2024, 3, 15, 19, 0, tzinfo=timezone.utc)


def _store(session, created_at: datetime, *, chat_id: int | None = None) -> Notification:
    return NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=1,
            notification_type=NOTIFICATION_CHAT_INACTIVE_2_DAYS,
            title="Chat Inactive Alert",
            message="idle",
            chat_id=chat_id,
            created_at=created_at,
        )
    )


def test_reset_settings_cache_reloads_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_TIMEZONE", "Europe/Berlin")
    reset_settings_cache()
    try:
        assert get_app_timezone() == ZoneInfo("Europe/Berlin")

        monkeypatch.setenv("APP_TIMEZONE", "UTC+05:30")
        reset_settings_cache()
        assert get_app_timezone().utcoffset(None) == timedelta(hours=5, minutes=30)
    finally:
        monkeypatch.setenv("APP_TIMEZONE", "UTC")
        reset_settings_cache()


def test_start_of_day_follows_app_timezone(app_timezone) -> None:
    kolkata = app_timezone("Asia/Kolkata")

    midnight = start_of_day(EVENING_UTC)

    assert midnight == datetime(2024, 3, 16, tzinfo=kolkata)
    assert midnight == datetime(2024, 3, 15, 18, 30, tzinfo=timezone.utc)


def test_sweeper_uses_app_day_not_utc_day(session, app_timezone) -> None:
    app_timezone("Asia/Kolkata")
    yesterday_ist = _store(session, BEFORE_IST_MIDNIGHT)
    today_ist = _store(session, AFTER_IST_MIDNIGHT)

    result = cleanup_old_notifications(session, now=EVENING_UTC)

    repository = NotificationRepository(session)
    assert result.deleted_count == 1
    assert repository.get(yesterday_ist.id) is None
    assert repository.get(today_ist.id) is not None


def test_guard_uses_app_day(session, app_timezone, make_chat) -> None:
    app_timezone("Asia/Kolkata")
    chat = make_chat(last_activity=EVENING_UTC - timedelta(days=3))
    _store(session, BEFORE_IST_MIDNIGHT, chat_id=chat.id)

    assert not notification_exists_today(
        session,
        chat_id=chat.id,
        notification_type=NOTIFICATION_CHAT_INACTIVE_2_DAYS,
        now=EVENING_UTC,
    )

    outcome = scan_inactive_chats(session, days=2, is_gold=False, now=EVENING_UTC)

    assert outcome.generated == 1
    assert notification_exists_today(
        session,
        chat_id=chat.id,
        notification_type=NOTIFICATION_CHAT_INACTIVE_2_DAYS,
        now=EVENING_UTC,
    )
