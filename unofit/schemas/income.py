"""
Income schemas
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class IncomeRecordOut(BaseModel):
    id: int
    amount: float
    description: Optional[str] = None
    created_by: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("amount", mode="before")
    @classmethod
    def amount_as_float(cls, v):
        if isinstance(v, Decimal):
            return float(v)
        return v


class IncomeSummaryOut(BaseModel):
    """Income total plus the most recent records, newest first"""

    total: float
    recent: List[IncomeRecordOut]
    message: str
