"""Task model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, JSON
from datetime import datetime
from typing import List, Literal, Optional

from taskhub.models.common import new_id, utcnow

TaskStatus = Literal["todo", "in-progress", "review", "done"]
TaskPriority = Literal["low", "medium", "high", "urgent"]


class Task(SQLModel, table=True):
    """Task entity belonging to a project, optionally assigned and tagged."""

    id: str = Field(default_factory=lambda: new_id("task"), primary_key=True)
    title: str = Field(max_length=200)
    description: str = Field(default="")
    project_id: str = Field(index=True)
    assignee_id: Optional[str] = Field(default=None, index=True)
    status: str = Field(default="todo", max_length=20)  # todo, in-progress, review, done
    priority: str = Field(default="medium", max_length=20)  # low, medium, high, urgent
    due_date: Optional[datetime] = Field(default=None, sa_type=DateTime)  # naive UTC
    # Tag ids; always reassigned as a new list so the JSON column is flagged dirty
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
