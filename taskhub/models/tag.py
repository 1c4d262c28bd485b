"""Tag model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from datetime import datetime

from taskhub.models.common import new_id, utcnow


class Tag(SQLModel, table=True):
    """Tag entity. Tags have no updated_at."""

    id: str = Field(default_factory=lambda: new_id("tag"), primary_key=True)
    name: str = Field(max_length=50)
    color: str = Field(max_length=9)  # hex, e.g. #3b82f6
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
