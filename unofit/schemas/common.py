"""
Request/response shapes shared by several endpoints
"""
import json
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def as_text(value: Any) -> Optional[str]:
    """
    Keep strings and None as they are; store any other JSON value as its JSON text

    A numeric role such as 1 becomes "1", which no role matches, so it is denied.
    """
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class RoleRequest(BaseModel):
    """Body of POST endpoints that only carry the caller's role"""

    role: Optional[str] = Field(default=None, description="Role the caller acts as (ADM, GT, EV)")

    @field_validator("role", mode="before")
    @classmethod
    def role_as_text(cls, v):
        return as_text(v)


class ActionResult(BaseModel):
    success: bool = True
    message: str
