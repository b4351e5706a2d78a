"""
Control activation endpoint
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from unofit.core.deps import get_db, get_role_resolver, RoleResolver
from unofit.core.errors import PermissionDenied
from unofit.core.permissions import Capability
from unofit.schemas.common import RoleRequest, ActionResult
from unofit.services.activity_service import CONTROL_ACTIVATED, CONTROL_ACTIVATION_DENIED, log_activity

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/activate", response_model=ActionResult)
async def activate_control_endpoint(
    payload: RoleRequest,
    db: Session = Depends(get_db),
    resolver: RoleResolver = Depends(get_role_resolver),
):
    """Activate control (requires manage_control; denials are logged)"""
    principal = resolver.resolve(payload.role)

    if not principal.can(Capability.MANAGE_CONTROL):
        log_activity(db, CONTROL_ACTIVATION_DENIED, principal.role, "attempted")
        logger.warning("Control activation denied for role %r", principal.role)
        raise PermissionDenied("No tienes permiso para activar el control")

    log_activity(db, CONTROL_ACTIVATED, principal.role, "success")
    return ActionResult(success=True, message="Control activo")
