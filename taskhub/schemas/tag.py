"""Tag schemas."""
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import Optional

from taskhub.schemas.common import ResponseModel, UtcDateTime, reject_null

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"


class TagCreate(BaseModel):
    """Schema for creating a tag."""
    name: str = Field(..., min_length=1, max_length=50, description="Tag name")
    color: str = Field(..., pattern=HEX_COLOR_PATTERN, description="Tag color (hex code)")


class TagUpdate(BaseModel):
    """Partial update for a tag. Tags carry no updated_at."""
    name: Optional[str] = Field(None, min_length=1, max_length=50, description="Tag name")
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN, description="Tag color (hex code)")

    @field_validator("name", "color")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class TagResponse(ResponseModel):
    id: str
    name: str
    color: str
    created_at: UtcDateTime
