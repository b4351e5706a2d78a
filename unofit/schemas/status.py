"""
System status schemas
"""
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from unofit.schemas.common import as_text


class StatusOut(BaseModel):
    status: str


class StatusUpdate(BaseModel):
    """Schema for changing the system status"""

    role: Optional[str] = Field(default=None, description="Role the caller acts as")
    new_status: Optional[str] = Field(
        default=None,
        alias="newStatus",
        description="Free-text status to store",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("role", "new_status", mode="before")
    @classmethod
    def fields_as_text(cls, v):
        return as_text(v)


class StatusUpdateOut(BaseModel):
    success: bool = True
    status: Optional[str] = None
