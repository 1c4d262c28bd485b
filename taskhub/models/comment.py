"""Comment model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from datetime import datetime

from taskhub.models.common import new_id, utcnow


class Comment(SQLModel, table=True):
    """Comment left by a user on a task."""

    id: str = Field(default_factory=lambda: new_id("comment"), primary_key=True)
    task_id: str = Field(index=True)
    user_id: str = Field(index=True)
    content: str
    created_at: datetime = Field(default_factory=utcnow, index=True, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
