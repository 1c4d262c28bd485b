"""Project model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from datetime import datetime
from typing import Literal

from taskhub.models.common import new_id, utcnow

ProjectStatus = Literal["active", "archived", "completed"]


class Project(SQLModel, table=True):
    """Project entity owned by a user."""

    id: str = Field(default_factory=lambda: new_id("project"), primary_key=True)
    name: str = Field(max_length=255)
    description: str = Field(default="")
    # No foreign key: dangling owner ids are allowed
    owner_id: str = Field(index=True)
    status: str = Field(default="active", max_length=20)  # active, archived, completed
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
