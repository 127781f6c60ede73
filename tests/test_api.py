"""Integration tests for the notification, reminder and chat endpoints."""

from __future__ import annotations

from datetime import timedelta

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.config import Settings, get_settings
from app.domain.entities import NOTIFICATION_SYSTEM_ALERT, Notification
from app.infrastructure.database import get_db
from app.infrastructure.repositories import NotificationRepository, ReminderRepository
from app.utils import now_in_app_timezone

ADMIN = {"X-Admin-Key": "secret"}
USER = {"X-User-Id": "1"}


@pytest.fixture()
def client(session):
    """Return a test client whose requests share the test session."""

    from main import create_app

    app = create_app()

    def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_settings] = lambda: Settings(
        database_url="sqlite://", admin_api_key="secret", scheduler_enabled=False
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _store_notification(session, *, user_id: int = 1, title: str = "Heads up") -> Notification:
    return NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=user_id,
            notification_type=NOTIFICATION_SYSTEM_ALERT,
            title=title,
            message="Scheduled maintenance tonight",
            created_at=now_in_app_timezone(),
        )
    )


def test_health_reports_cadence(client: TestClient) -> None:
    response = client.get("/notifications/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["next_run"] == "09:00 daily"
    assert body["reminder_interval_minutes"] == 5


def test_generate_requires_admin_key(client: TestClient) -> None:
    assert client.post("/notifications/generate").status_code == 403
    assert (
        client.post("/notifications/generate", headers={"X-Admin-Key": "wrong"}).status_code
        == 403
    )


def test_generate_returns_summary(client: TestClient, make_chat) -> None:
    make_chat(last_activity=now_in_app_timezone() - timedelta(days=3))
    make_chat(last_activity=now_in_app_timezone() - timedelta(days=6), is_gold=True)

    response = client.post("/notifications/generate", headers=ADMIN)

    assert response.status_code == 200
    body = response.json()
    assert body["cleanup"] == {"deleted_count": 0}
    assert body["chat_notifications"] == {
        "two_day_count": 1,
        "five_day_count": 0,
        "total_generated": 1,
    }
    assert body["fundraiser_notifications"]["total_generated"] == 2
    assert body["errors"] == []

    again = client.post("/notifications/generate", headers=ADMIN).json()
    assert again["chat_notifications"]["total_generated"] == 0
    assert again["fundraiser_notifications"]["total_generated"] == 0


def test_list_stats_and_mark_read(client: TestClient, session) -> None:
    first = _store_notification(session, title="first")
    _store_notification(session, title="second")
    _store_notification(session, user_id=2, title="someone else")

    listing = client.get("/notifications/", headers=USER)
    assert listing.status_code == 200
    assert listing.json()["count"] == 2

    marked = client.patch(f"/notifications/{first.id}/read", headers=USER)
    assert marked.status_code == 200
    assert marked.json()["is_read"] is True

    stats = client.get("/notifications/stats", headers=USER).json()
    assert stats == {"total": 2, "unread": 1, "read": 1}


def test_user_cannot_mark_foreign_notification(client: TestClient, session) -> None:
    foreign = _store_notification(session, user_id=2)

    response = client.patch(f"/notifications/{foreign.id}/read", headers=USER)

    assert response.status_code == 404


def test_user_endpoints_require_caller_id(client: TestClient) -> None:
    assert client.get("/notifications/").status_code == 401
    assert client.get("/reminders/").status_code == 401


def test_admin_listing_validates_kind(client: TestClient, session) -> None:
    _store_notification(session)

    assert client.get("/notifications/all", headers=ADMIN).json()["count"] == 1
    filtered = client.get(
        "/notifications/all",
        params={"notification_type": "chat_inactive_2days"},
        headers=ADMIN,
    )
    assert filtered.json()["count"] == 0
    bad = client.get(
        "/notifications/all", params={"notification_type": "carrier_pigeon"}, headers=ADMIN
    )
    assert bad.status_code == 400


def test_admin_create_and_delete_notification(client: TestClient) -> None:
    payload = {
        "user_id": 1,
        "notification_type": NOTIFICATION_SYSTEM_ALERT,
        "title": "Maintenance",
        "message": "Back at 10pm",
    }

    created = client.post("/notifications/", json=payload, headers=ADMIN)
    assert created.status_code == 201
    notification_id = created.json()["id"]

    invalid = client.post(
        "/notifications/", json={**payload, "notification_type": "nope"}, headers=ADMIN
    )
    assert invalid.status_code == 422

    assert client.delete(f"/notifications/{notification_id}", headers=ADMIN).status_code == 204
    assert client.delete(f"/notifications/{notification_id}", headers=ADMIN).status_code == 404


def test_reminder_lifecycle(client: TestClient) -> None:
    due = now_in_app_timezone() + timedelta(minutes=3)
    payload = {
        "title": "Call the donor",
        "message": "Follow up on the pledge",
        "reminder_time": due.isoformat(),
        "is_recurring": True,
        "recurrence_pattern": "daily",
    }

    created = client.post("/reminders/", json=payload, headers=USER)
    assert created.status_code == 201
    reminder = created.json()
    assert reminder["chat_name"] is None
    assert reminder["is_sent"] is False

    listing = client.get("/reminders/", headers=USER).json()
    assert listing["count"] == 1
    assert client.get(f"/reminders/{reminder['id']}", headers={"X-User-Id": "2"}).status_code == 404

    run = client.post("/reminders/process-due", headers=ADMIN)
    assert run.status_code == 200
    assert run.json()["processed_reminder_ids"] == [reminder["id"]]
    assert run.json()["errors"] == []

    notifications = client.get("/notifications/", headers=USER).json()["notifications"]
    assert [n["notification_type"] for n in notifications] == ["user_reminder"]

    toggled = client.patch(f"/reminders/{reminder['id']}/toggle", headers=USER)
    assert toggled.json()["is_active"] is False

    renamed = client.patch(
        f"/reminders/{reminder['id']}", json={"title": "Call back"}, headers=USER
    )
    assert renamed.status_code == 200
    assert renamed.json()["title"] == "Call back"

    assert client.delete(f"/reminders/{reminder['id']}", headers=USER).status_code == 204
    assert client.get(f"/reminders/{reminder['id']}", headers=USER).status_code == 404


def test_reminder_validation(client: TestClient) -> None:
    base = {
        "title": "Call the donor",
        "message": "Follow up",
        "reminder_time": now_in_app_timezone().isoformat(),
    }

    missing_pattern = client.post(
        "/reminders/", json={**base, "is_recurring": True}, headers=USER
    )
    assert missing_pattern.status_code == 422

    bad_pattern = client.post(
        "/reminders/",
        json={**base, "is_recurring": True, "recurrence_pattern": "hourly"},
        headers=USER,
    )
    assert bad_pattern.status_code == 422

    unknown_chat = client.post("/reminders/", json={**base, "chat_id": 404}, headers=USER)
    assert unknown_chat.status_code == 400

    created = client.post("/reminders/", json=base, headers=USER).json()
    empty_update = client.patch(f"/reminders/{created['id']}", json={}, headers=USER)
    assert empty_update.status_code == 422
    assert client.patch("/reminders/999", json={"title": "x"}, headers=USER).status_code == 404


def test_chat_activity_hook(client: TestClient, make_chat) -> None:
    chat = make_chat(last_activity=now_in_app_timezone() - timedelta(days=3))

    response = client.post(f"/chats/{chat.id}/activity", headers=ADMIN)

    assert response.status_code == 200
    assert response.json()["message_count"] == chat.message_count + 1
    assert client.post("/chats/999/activity", headers=ADMIN).status_code == 404


@pytest.mark.parametrize(
    "field", ["title", "message", "reminder_time", "is_recurring", "is_active"]
)
def test_reminder_update_rejects_explicit_null(client: TestClient, field: str) -> None:
    created = client.post(
        "/reminders/",
        json={
            "title": "Call the donor",
            "message": "Follow up",
            "reminder_time": now_in_app_timezone().isoformat(),
        },
        headers=USER,
    ).json()

    response = client.patch(f"/reminders/{created['id']}", json={field: None}, headers=USER)

    assert response.status_code == 422
    unchanged = client.get(f"/reminders/{created['id']}", headers=USER).json()
    assert unchanged["title"] == "Call the donor"


def test_clearing_recurrence_pattern_is_allowed(client: TestClient) -> None:
    created = client.post(
        "/reminders/",
        json={
            "title": "Call the donor",
            "message": "Follow up",
            "reminder_time": now_in_app_timezone().isoformat(),
        },
        headers=USER,
    ).json()

    response = client.patch(
        f"/reminders/{created['id']}", json={"recurrence_pattern": None}, headers=USER
    )

    assert response.status_code == 200
    assert response.json()["recurrence_pattern"] is None


def test_reminder_pass_surfaces_read_failure(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_list_due(self, window_start, window_end):
        raise OperationalError("SELECT reminder", {}, Exception("database is locked"))

    monkeypatch.setattr(ReminderRepository, "list_due", broken_list_due)

    response = client.post("/reminders/process-due", headers=ADMIN)

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 0
    assert len(body["errors"]) == 1
