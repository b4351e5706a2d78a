"""
Message / activity feed endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from unofit.core.deps import get_db
from unofit.schemas.activity import ActivityLogOut, MessagesOut, MessageSend
from unofit.schemas.common import ActionResult
from unofit.services.activity_service import MESSAGE_SENT, list_recent_activity, log_activity

router = APIRouter()


@router.get("", response_model=MessagesOut)
async def list_messages_endpoint(db: Session = Depends(get_db)):
    """Last 20 activity entries, newest first"""
    entries = [ActivityLogOut.model_validate(e) for e in list_recent_activity(db)]
    return MessagesOut(messages=entries)


# No permission check: any caller may post a message.
@router.post("/send", response_model=ActionResult)
async def send_message_endpoint(
    payload: MessageSend,
    db: Session = Depends(get_db),
):
    log_activity(db, MESSAGE_SENT, payload.role, payload.message)
    return ActionResult(success=True, message="Mensajes listos")
