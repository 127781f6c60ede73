"""Shared fixtures: an isolated in-memory database and a fixed clock."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["SCHEDULER_ENABLED"] = "false"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.domain.entities import Chat, Reminder  # noqa: E402
from app.infrastructure import models  # noqa: E402,F401
from app.infrastructure.database import Base, build_engine  # noqa: E402
from app.infrastructure.repositories import ChatRepository, ReminderRepository  # noqa: E402
from app.utils import get_app_timezone  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session(engine):
    """Return a session bound to a fresh schema for every test."""

    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def app_timezone(monkeypatch: pytest.MonkeyPatch):
    """Switch ``APP_TIMEZONE`` for one test; the UTC default is restored afterwards."""

    def _use(name: str):
        monkeypatch.setenv("APP_TIMEZONE", name)
        reset_settings_cache()
        return get_app_timezone()

    yield _use
    reset_settings_cache()


@pytest.fixture()
def now() -> datetime:
    """A fixed mid-day instant so day boundaries are never crossed by accident."""

    return datetime(2024, 3, 15, 12, 0, tzinfo=get_app_timezone())


@pytest.fixture()
def make_chat(session):
    def _make_chat(
        *,
        last_activity: datetime,
        is_gold: bool = False,
        name: str = "Campaign chat",
        user_id: int = 1,
        message_count: int = 3,
    ) -> Chat:
        return ChatRepository(session).create(
            Chat(
                id=None,
                user_id=user_id,
                name=name,
                last_activity=last_activity,
                is_gold=is_gold,
                message_count=message_count,
            )
        )

    return _make_chat


@pytest.fixture()
def make_reminder(session):
    def _make_reminder(
        *,
        reminder_time: datetime,
        is_recurring: bool = False,
        recurrence_pattern: str | None = None,
        chat_id: int | None = None,
        is_active: bool = True,
        user_id: int = 1,
        title: str = "Call the donor",
        message: str = "Follow up on the pledge",
    ) -> Reminder:
        return ReminderRepository(session).create(
            Reminder(
                id=None,
                user_id=user_id,
                title=title,
                message=message,
                reminder_time=reminder_time,
                chat_id=chat_id,
                is_recurring=is_recurring,
                recurrence_pattern=recurrence_pattern,
                is_active=is_active,
            )
        )

    return _make_reminder
