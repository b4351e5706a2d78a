"""
System reset service
"""
import logging

from sqlalchemy.orm import Session

from unofit.services.activity_service import SYSTEM_RESET, clear_activity, log_activity
from unofit.services.income_service import clear_income
from unofit.services.status_service import reset_status

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "SYSTEM"


def reset_system(db: Session) -> None:
    """
    Wipe the activity log and income records, restore the default status,
    then record the reset itself

    Each step commits on its own; a failure part-way leaves the earlier
    steps applied.
    """
    removed_logs = clear_activity(db)
    removed_income = clear_income(db)
    reset_status(db)
    log_activity(db, SYSTEM_RESET, SYSTEM_ACTOR, "full reset")

    logger.info(
        "System reset: removed %d activity entries and %d income records",
        removed_logs,
        removed_income,
    )
