"""
System status service
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from unofit.core.config import settings
from unofit.models.system_state import SystemState, STATUS_KEY
from unofit.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)


def find_status_row(db: Session) -> Optional[SystemState]:
    return db.query(SystemState).filter(SystemState.key == STATUS_KEY).first()


def get_status(db: Session) -> str:
    """Current status text, or the default when the row or its value is missing."""
    row = find_status_row(db)
    if row is None or not row.value:
        return settings.DEFAULT_STATUS
    return row.value


def _update_status(db: Session, value: Optional[str]) -> int:
    updated = (
        db.query(SystemState)
        .filter(SystemState.key == STATUS_KEY)
        .update(
            {SystemState.value: value, SystemState.updated_at: now_utc()},
            synchronize_session=False,
        )
    )
    db.commit()
    return updated


def set_status(db: Session, value: Optional[str]) -> None:
    """
    Overwrite the status text

    Recreates the status row if it has gone missing since startup.
    """
    if _update_status(db, value):
        return

    logger.warning("Status row missing, recreating it")
    db.add(SystemState(key=STATUS_KEY, value=value, updated_at=now_utc()))
    try:
        db.commit()
    except IntegrityError:
        # Recreated concurrently; write over it
        db.rollback()
        _update_status(db, value)


def reset_status(db: Session) -> None:
    set_status(db, settings.DEFAULT_STATUS)
