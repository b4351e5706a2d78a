"""
User schemas
"""
from typing import List

from pydantic import BaseModel, Field, ConfigDict


class UserOut(BaseModel):
    """User output schema"""

    id: int
    name: str
    role: str
    active: bool

    model_config = ConfigDict(from_attributes=True)


class UserListOut(BaseModel):
    users: List[UserOut]


class UsersCheckOut(BaseModel):
    """
    Result of a user review

    can_manage is false when the caller lacks the manage-users capability;
    the user list is returned either way.
    """

    success: bool = True
    can_manage: bool = Field(..., alias="canManage")
    users: List[UserOut]
    message: str

    model_config = ConfigDict(populate_by_name=True)
