"""User schemas."""
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import Optional

from taskhub.models.user import UserRole
from taskhub.schemas.common import ResponseModel, UtcDateTime, reject_null


class UserCreate(BaseModel):
    """Schema for creating a user."""
    name: str = Field(..., min_length=1, max_length=255, description="User full name")
    email: str = Field(..., min_length=1, max_length=255, description="User email address")
    role: UserRole = Field(..., description="User role")


class UserUpdate(BaseModel):
    """Partial update; only the fields that are set are applied."""
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="User full name")
    email: Optional[str] = Field(None, min_length=1, max_length=255, description="User email address")
    role: Optional[UserRole] = Field(None, description="User role")

    @field_validator("name", "email", "role")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class UserResponse(ResponseModel):
    id: str
    name: str
    email: str
    role: str
    created_at: UtcDateTime
    updated_at: UtcDateTime
