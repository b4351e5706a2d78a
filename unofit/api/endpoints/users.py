"""
User endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from unofit.core.deps import get_db, get_role_resolver, RoleResolver
from unofit.core.permissions import Capability
from unofit.schemas.common import RoleRequest
from unofit.schemas.user import UserOut, UserListOut, UsersCheckOut
from unofit.services.activity_service import USERS_REVIEWED, log_activity
from unofit.services.user_service import list_users

router = APIRouter()


@router.get("", response_model=UserListOut)
async def list_users_endpoint(db: Session = Depends(get_db)):
    """All users ordered by id"""
    users = [UserOut.model_validate(u) for u in list_users(db)]
    return UserListOut(users=users)


@router.post("/check", response_model=UsersCheckOut)
async def check_users_endpoint(
    payload: RoleRequest,
    db: Session = Depends(get_db),
    resolver: RoleResolver = Depends(get_role_resolver),
):
    """
    Review the user list

    Never rejected: without manage_users the caller gets a read-only answer
    and nothing is logged.
    """
    principal = resolver.resolve(payload.role)
    users = [UserOut.model_validate(u) for u in list_users(db)]

    if not principal.can(Capability.MANAGE_USERS):
        return UsersCheckOut(
            success=True,
            can_manage=False,
            users=users,
            message="Usuarios OK (solo lectura)",
        )

    log_activity(db, USERS_REVIEWED, principal.role, "full access")
    return UsersCheckOut(
        success=True,
        can_manage=True,
        users=users,
        message="Usuarios OK",
    )
