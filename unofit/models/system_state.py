"""
System state model

Key/value rows; the dashboard status lives under key 'status'.
"""
from unofit.utils.datetime_utils import now_utc
from sqlalchemy import Column, Integer, String, Text, DateTime

from unofit.db.base import Base

STATUS_KEY = "status"


class SystemState(Base):
    __tablename__ = "system_state"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(255), unique=True, nullable=False)
    value = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=now_utc, nullable=True)
