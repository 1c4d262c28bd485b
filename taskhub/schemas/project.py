"""Project schemas."""
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import Optional

from taskhub.models.project import ProjectStatus
from taskhub.schemas.common import ResponseModel, UtcDateTime, reject_null


class ProjectCreate(BaseModel):
    """Schema for creating a project."""
    name: str = Field(..., min_length=1, max_length=255, description="Project name")
    description: str = Field("", description="Project description")
    owner_id: str = Field(..., min_length=1, description="Owner user ID")
    status: ProjectStatus = Field("active", description="Project status")


class ProjectUpdate(BaseModel):
    """Partial update; the owner is fixed at creation."""
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    status: Optional[ProjectStatus] = Field(None, description="Project status")

    @field_validator("name", "description", "status")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class ProjectResponse(ResponseModel):
    id: str
    name: str
    description: str
    owner_id: str
    status: str
    created_at: UtcDateTime
    updated_at: UtcDateTime
