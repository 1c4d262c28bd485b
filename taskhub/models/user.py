"""User model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from datetime import datetime
from typing import Literal

from taskhub.models.common import new_id, utcnow

UserRole = Literal["admin", "user", "viewer"]


class User(SQLModel, table=True):
    """User entity. Email is not unique; deleting a user never cascades."""

    id: str = Field(default_factory=lambda: new_id("user"), primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    role: str = Field(default="user", max_length=20)  # admin, user, viewer
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
