"""Task schemas."""
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from datetime import datetime
from typing import List, Optional

from taskhub.models.task import TaskPriority, TaskStatus
from taskhub.schemas.common import ResponseModel, UtcDateTime, reject_null, to_naive_utc


def _unique(tag_ids: List[str]) -> List[str]:
    # Tags behave as a set; keep first occurrence order for stable output
    return list(dict.fromkeys(tag_ids))


class TaskCreate(BaseModel):
    """Schema for creating a task."""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("")
    project_id: str = Field(..., min_length=1)
    assignee_id: Optional[str] = None
    status: TaskStatus = "todo"
    priority: TaskPriority = "medium"
    due_date: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("due_date")
    @classmethod
    def _normalize_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value) if value is not None else None

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: List[str]) -> List[str]:
        return _unique(value)


class TaskUpdate(BaseModel):
    """
    Store-level partial update

    Fields left unset are untouched. ``assignee_id`` and ``due_date`` may be
    set to None explicitly to clear them; every other field rejects null.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    project_id: Optional[str] = Field(None, min_length=1)
    assignee_id: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    tags: Optional[List[str]] = None

    @field_validator("title", "description", "project_id", "status", "priority", "tags")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)

    @field_validator("due_date")
    @classmethod
    def _normalize_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value) if value is not None else None

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: List[str]) -> List[str]:
        return _unique(value)


class TaskChanges(BaseModel):
    """Tool-level patch for update_task; due_date arrives as an ISO string."""
    title: Optional[str] = Field(None, min_length=1, max_length=200, description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    assignee_id: Optional[str] = Field(None, description="Assignee user ID (null to unassign)")
    status: Optional[TaskStatus] = Field(None, description="Task status")
    priority: Optional[TaskPriority] = Field(None, description="Task priority")
    due_date: Optional[str] = Field(None, description="Due date (ISO string, null to clear)")
    tags: Optional[List[str]] = Field(None, description="Tag IDs (replaces the current set)")

    @field_validator("title", "description", "status", "priority", "tags")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class TaskResponse(ResponseModel):
    id: str
    title: str
    description: str
    project_id: str
    assignee_id: Optional[str] = None
    status: str
    priority: str
    due_date: Optional[UtcDateTime] = None
    tags: List[str] = []
    created_at: UtcDateTime
    updated_at: UtcDateTime
