"""
Activity log service
"""
import logging
from unofit.utils.datetime_utils import now_utc
from typing import List, Optional

from sqlalchemy.orm import Session

from unofit.models.activity_log import ActivityLog

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 20

# Action tags written to the activity log
STATUS_CHANGED = "status_changed"
STATUS_CHANGE_DENIED = "status_change_denied"
CONTROL_ACTIVATED = "control_activated"
CONTROL_ACTIVATION_DENIED = "control_activation_denied"
MESSAGE_SENT = "message_sent"
SYSTEM_RESET = "system_reset"
USERS_REVIEWED = "users_reviewed"


def log_activity(
    db: Session,
    action: str,
    user_role: Optional[str] = None,
    details: Optional[str] = None,
) -> ActivityLog:
    """
    Append an activity log entry

    Args:
        db: Database session
        action: Action tag (e.g. "status_changed", "control_activation_denied")
        user_role: Role the caller asserted, or "SYSTEM"
        details: Free text (new status, message body, ...)

    Returns:
        Created ActivityLog instance
    """
    entry = ActivityLog(
        action=action,
        user_role=user_role,
        details=details,
        created_at=now_utc(),
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.debug("Activity logged: %s (role=%s)", action, user_role)
    return entry


def list_recent_activity(db: Session, limit: int = RECENT_ACTIVITY_LIMIT) -> List[ActivityLog]:
    """Most recent entries, newest first."""
    return (
        db.query(ActivityLog)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .limit(limit)
        .all()
    )


def clear_activity(db: Session) -> int:
    """Delete every entry. Returns the number of rows removed."""
    deleted = db.query(ActivityLog).delete(synchronize_session=False)
    db.commit()
    return deleted
