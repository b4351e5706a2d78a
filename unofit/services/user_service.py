"""
User service
"""
from typing import List

from sqlalchemy.orm import Session

from unofit.models.user import User


def list_users(db: Session) -> List[User]:
    """All users ordered by id."""
    return db.query(User).order_by(User.id.asc()).all()
