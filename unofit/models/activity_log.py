"""
Activity log model

The only audit trail: actions and permission denials, newest read first.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime

from unofit.db.base import Base


class ActivityLog(Base):
    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(String(255), nullable=False)  # e.g. "status_changed", "control_activation_denied"
    user_role = Column(String(10), nullable=True)  # as asserted by the caller, or "SYSTEM"
    details = Column(Text, nullable=True)
    # Set explicitly by the activity service
    created_at = Column(DateTime(timezone=True), nullable=False)
