"""
Dependencies for FastAPI endpoints
"""
from typing import Generator, Optional

from unofit.core.permissions import Principal
from unofit.db.session import SessionLocal


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class RoleResolver:
    """
    Turns the role a request asserts into the Principal handlers check against

    Handlers only see the Principal, so a resolver that verifies identity
    can replace the default one without touching them.
    """

    def resolve(self, asserted_role: Optional[str]) -> Principal:
        raise NotImplementedError


class ClientAssertedRoleResolver(RoleResolver):
    """Trusts the role sent by the client (query parameter or body field)."""

    def resolve(self, asserted_role: Optional[str]) -> Principal:
        return Principal(role=asserted_role)


_default_resolver = ClientAssertedRoleResolver()


def get_role_resolver() -> RoleResolver:
    """Dependency for the active role resolution strategy"""
    return _default_resolver
