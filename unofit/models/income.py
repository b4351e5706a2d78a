"""
Income record model
"""
from unofit.utils.datetime_utils import now_utc
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey

from unofit.db.base import Base


class IncomeRecord(Base):
    __tablename__ = "income_records"

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String(255), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
