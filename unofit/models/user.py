"""
User model
"""
from unofit.utils.datetime_utils import now_utc
from sqlalchemy import Column, Integer, String, Boolean, DateTime, CheckConstraint

from unofit.db.base import Base


class User(Base):
    __tablename__ = "users"

    __table_args__ = (
        CheckConstraint("role IN ('ADM', 'GT', 'EV')", name="ck_users_role"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    role = Column(String(10), nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
