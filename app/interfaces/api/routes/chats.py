"""Hook used by the messaging service to reset a chat's inactivity clock."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.chats import record_chat_activity
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_admin
from app.interfaces.api.schemas import ChatActivityRead

router = APIRouter(prefix="/chats", tags=["chats"])


@router.post(
    "/{chat_id}/activity",
    response_model=ChatActivityRead,
    dependencies=[Depends(require_admin)],
)
def touch_chat_activity(chat_id: int, db: Session = Depends(get_db)) -> ChatActivityRead:
    """Record that a message was appended to ``chat_id``."""

    try:
        chat = record_chat_activity(db, chat_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ChatActivityRead.model_validate(chat)


__all__ = ["router"]
