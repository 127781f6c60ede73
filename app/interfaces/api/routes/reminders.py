"""Endpoints for managing reminders and triggering the reminder pass."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.reminders import (
    create_reminder as create_reminder_uc,
    delete_reminder as delete_reminder_uc,
    get_reminder as get_reminder_uc,
    list_user_reminders,
    process_due_reminders,
    toggle_reminder as toggle_reminder_uc,
    update_reminder as update_reminder_uc,
)
from app.domain.entities import Reminder
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user_id, require_admin
from app.interfaces.api.schemas import (
    ReminderCreate,
    ReminderList,
    ReminderRead,
    ReminderRunRead,
    ReminderUpdate,
)

router = APIRouter(prefix="/reminders", tags=["reminders"])


def _reminder_to_schema(reminder: Reminder) -> ReminderRead:
    return ReminderRead.model_validate(reminder)


@router.post("/", response_model=ReminderRead, status_code=status.HTTP_201_CREATED)
def create_reminder(
    payload: ReminderCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> ReminderRead:
    reminder = Reminder(id=None, user_id=user_id, **payload.model_dump())
    try:
        saved = create_reminder_uc(db, reminder)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _reminder_to_schema(saved)


@router.get("/", response_model=ReminderList)
def list_reminders(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> ReminderList:
    """Return the caller's reminders ordered by due time."""

    reminders = [_reminder_to_schema(reminder) for reminder in list_user_reminders(db, user_id)]
    return ReminderList(reminders=reminders, count=len(reminders))


@router.post(
    "/process-due",
    response_model=ReminderRunRead,
    dependencies=[Depends(require_admin)],
)
def trigger_reminder_pass(db: Session = Depends(get_db)) -> ReminderRunRead:
    """Fire reminders due within the next five minutes."""

    summary = process_due_reminders(db)
    return ReminderRunRead.model_validate(summary.to_dict())


@router.get("/{reminder_id}", response_model=ReminderRead)
def read_reminder(
    reminder_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> ReminderRead:
    try:
        reminder = get_reminder_uc(db, reminder_id, user_id=user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _reminder_to_schema(reminder)


@router.patch("/{reminder_id}", response_model=ReminderRead)
def update_reminder(
    reminder_id: int,
    payload: ReminderUpdate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> ReminderRead:
    try:
        get_reminder_uc(db, reminder_id, user_id=user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    try:
        reminder = update_reminder_uc(
            db, reminder_id, user_id=user_id, changes=payload.changes()
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _reminder_to_schema(reminder)


@router.patch("/{reminder_id}/toggle", response_model=ReminderRead)
def toggle_reminder(
    reminder_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> ReminderRead:
    try:
        reminder = toggle_reminder_uc(db, reminder_id, user_id=user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _reminder_to_schema(reminder)


@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reminder(
    reminder_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Response:
    try:
        delete_reminder_uc(db, reminder_id, user_id=user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
