"""
Database initialization

Creates missing tables and seeds the status row and the three default users.
Safe to run on every start: each step checks for existing data first.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from unofit.core.config import settings
from unofit.core.permissions import Role
from unofit.db.base import Base
from unofit.models import SystemState, STATUS_KEY, User
from unofit.services.status_service import find_status_row
from unofit.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)

SEED_USERS = [
    ("Admin", Role.ADM),
    ("Gerente", Role.GT),
    ("Evaluador", Role.EV),
]


def create_tables(db: Session) -> None:
    Base.metadata.create_all(bind=db.get_bind(), checkfirst=True)


def seed_status(db: Session) -> bool:
    """Insert the default status row if it is missing. Returns True if inserted."""
    if find_status_row(db) is not None:
        return False

    db.add(SystemState(
        key=STATUS_KEY,
        value=settings.DEFAULT_STATUS,
        updated_at=now_utc(),
    ))
    try:
        db.commit()
    except IntegrityError:
        # Another process inserted the row between our check and our insert
        db.rollback()
        logger.info("Status row created concurrently, keeping existing value")
        return False

    logger.info("Seeded default status: %s", settings.DEFAULT_STATUS)
    return True


def seed_users(db: Session) -> int:
    """Insert the default users if the table is empty. Returns the number inserted."""
    if db.query(User).first() is not None:
        return 0

    db.add_all([
        User(name=name, role=role.value, active=True, created_at=now_utc())
        for name, role in SEED_USERS
    ])
    db.commit()

    logger.info("Seeded %d default users", len(SEED_USERS))
    return len(SEED_USERS)


def init_db(db: Session) -> None:
    """
    Make sure the schema and default rows exist

    Racing cold starts may both see an empty users table; the resulting
    duplicate seed rows are tolerated.
    """
    create_tables(db)
    seed_status(db)
    seed_users(db)


if __name__ == "__main__":
    from unofit.core.logging import setup_logging
    from unofit.db.session import SessionLocal

    setup_logging()
    session = SessionLocal()
    try:
        init_db(session)
    finally:
        session.close()
