"""
System reset endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from unofit.core.deps import get_db
from unofit.schemas.common import ActionResult
from unofit.services.system_service import reset_system

router = APIRouter()


# No permission check: any caller may reset.
@router.post("/reset", response_model=ActionResult)
async def reset_endpoint(db: Session = Depends(get_db)):
    """Clear the activity log and income records and restore the default status"""
    reset_system(db)
    return ActionResult(success=True, message="Estado reiniciado")
