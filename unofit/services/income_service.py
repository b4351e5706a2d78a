"""
Income service
"""
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from unofit.models.income import IncomeRecord

RECENT_INCOME_LIMIT = 10


def get_income_total(db: Session) -> float:
    """Sum of all income amounts (0 when there are none)."""
    total = db.query(func.sum(IncomeRecord.amount)).scalar()
    if total is None:
        return 0.0
    return float(total)


def list_recent_income(db: Session, limit: int = RECENT_INCOME_LIMIT) -> List[IncomeRecord]:
    """Most recent income records, newest first."""
    return (
        db.query(IncomeRecord)
        .order_by(IncomeRecord.created_at.desc(), IncomeRecord.id.desc())
        .limit(limit)
        .all()
    )


def clear_income(db: Session) -> int:
    """Delete every income record. Returns the number of rows removed."""
    deleted = db.query(IncomeRecord).delete(synchronize_session=False)
    db.commit()
    return deleted
