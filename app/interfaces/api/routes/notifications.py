"""Endpoints for notifications and the manual notification pass."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationRunError,
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    generate_all_notifications,
    get_notification_stats,
    list_all_notifications,
    list_user_notifications,
    mark_notification_read as mark_notification_read_uc,
)
from app.config import Settings, get_settings
from app.domain.entities import Notification
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user_id, require_admin
from app.interfaces.api.schemas import (
    NotificationCreate,
    NotificationHealthRead,
    NotificationList,
    NotificationRead,
    NotificationRunRead,
    NotificationStatsRead,
)
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/health", response_model=NotificationHealthRead)
def notifications_health(settings: Settings = Depends(get_settings)) -> NotificationHealthRead:
    """Report that the notification system is reachable and its cadence."""

    return NotificationHealthRead(
        status="OK",
        checked_at=now_in_app_timezone(),
        next_run=(
            f"{settings.daily_notification_hour:02d}:"
            f"{settings.daily_notification_minute:02d} daily"
        ),
        reminder_interval_minutes=settings.reminder_interval_minutes,
        message="Notification system is running",
    )


@router.get("/", response_model=NotificationList)
def list_notifications(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> NotificationList:
    """Return the most recent notifications for the calling user."""

    notifications = list_user_notifications(db, user_id, limit=None)
    items = [_notification_to_schema(notification) for notification in notifications]
    return NotificationList(notifications=items, count=len(items))


@router.get("/stats", response_model=NotificationStatsRead)
def notification_stats(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> NotificationStatsRead:
    stats = get_notification_stats(db, user_id)
    return NotificationStatsRead(total=stats.total, unread=stats.unread, read=stats.read)


@router.get("/all", response_model=NotificationList, dependencies=[Depends(require_admin)])
def list_every_notification(
    notification_type: str | None = Query(default=None),
    is_read: bool | None = Query(default=None),
    db: Session = Depends(get_db),
) -> NotificationList:
    """Return notifications for every user, optionally filtered by kind."""

    try:
        notifications = list_all_notifications(
            db, notification_type=notification_type, is_read=is_read
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    items = [_notification_to_schema(notification) for notification in notifications]
    return NotificationList(notifications=items, count=len(items))


@router.post(
    "/generate",
    response_model=NotificationRunRead,
    dependencies=[Depends(require_admin)],
)
def trigger_notification_pass(db: Session = Depends(get_db)) -> NotificationRunRead:
    """Run the full notification pass synchronously and return its summary."""

    try:
        summary = generate_all_notifications(db)
    except NotificationRunError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    return NotificationRunRead.model_validate(summary.to_dict())


@router.post(
    "/",
    response_model=NotificationRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
) -> NotificationRead:
    notification = Notification(id=None, **payload.model_dump())
    try:
        saved = create_notification_uc(db, notification)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _notification_to_schema(saved)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> NotificationRead:
    try:
        notification = mark_notification_read_uc(db, notification_id, user_id=user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_notification(notification_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        delete_notification_uc(db, notification_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
