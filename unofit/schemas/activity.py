"""
Activity log (messages) schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from unofit.schemas.common import as_text


class ActivityLogOut(BaseModel):
    id: int
    action: str
    user_role: Optional[str] = None
    details: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MessagesOut(BaseModel):
    messages: List[ActivityLogOut]


class MessageSend(BaseModel):
    role: Optional[str] = Field(default=None, description="Role the caller acts as")
    message: Optional[str] = Field(default=None, description="Text recorded in the activity log")

    @field_validator("role", "message", mode="before")
    @classmethod
    def fields_as_text(cls, v):
        return as_text(v)
