"""
System status endpoints
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from unofit.core.deps import get_db, get_role_resolver, RoleResolver
from unofit.core.errors import PermissionDenied
from unofit.core.permissions import Capability
from unofit.schemas.status import StatusOut, StatusUpdate, StatusUpdateOut
from unofit.services.activity_service import STATUS_CHANGED, STATUS_CHANGE_DENIED, log_activity
from unofit.services.status_service import get_status, set_status

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=StatusOut)
async def get_status_endpoint(db: Session = Depends(get_db)):
    """Current system status (no permission required)"""
    return StatusOut(status=get_status(db))


@router.post("", response_model=StatusUpdateOut)
async def change_status_endpoint(
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    resolver: RoleResolver = Depends(get_role_resolver),
):
    """
    Change the system status

    Requires change_status. Denied attempts are recorded in the activity log
    together with the status that was attempted.
    """
    principal = resolver.resolve(payload.role)

    if not principal.can(Capability.CHANGE_STATUS):
        log_activity(db, STATUS_CHANGE_DENIED, principal.role, payload.new_status)
        logger.warning("Status change denied for role %r", principal.role)
        raise PermissionDenied("No tienes permiso para cambiar el estado")

    set_status(db, payload.new_status)
    log_activity(db, STATUS_CHANGED, principal.role, payload.new_status)

    return StatusUpdateOut(success=True, status=payload.new_status)
