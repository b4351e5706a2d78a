"""
Income endpoint
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from unofit.core.deps import get_db, get_role_resolver, RoleResolver
from unofit.core.errors import PermissionDenied
from unofit.core.permissions import Capability
from unofit.schemas.income import IncomeRecordOut, IncomeSummaryOut
from unofit.services.income_service import get_income_total, list_recent_income

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=IncomeSummaryOut)
async def income_summary_endpoint(
    role: Optional[str] = Query(None, description="Role the caller acts as"),
    db: Session = Depends(get_db),
    resolver: RoleResolver = Depends(get_role_resolver),
):
    """
    Income total and the 10 most recent records

    Requires view_income. Unlike status and control, a denial here is not
    written to the activity log.
    """
    principal = resolver.resolve(role)

    if not principal.can(Capability.VIEW_INCOME):
        logger.warning("Income view denied for role %r", principal.role)
        raise PermissionDenied("No tienes permiso para ver ingresos")

    recent = [IncomeRecordOut.model_validate(r) for r in list_recent_income(db)]
    return IncomeSummaryOut(
        total=get_income_total(db),
        recent=recent,
        message="Ingresos monitoreados",
    )
