"""Comment schemas."""
from pydantic import BaseModel, Field

from taskhub.schemas.common import ResponseModel, UtcDateTime


class CommentCreate(BaseModel):
    """Schema for creating a comment on a task."""
    task_id: str = Field(..., min_length=1, description="Task ID")
    user_id: str = Field(..., min_length=1, description="User ID (comment author)")
    content: str = Field(..., min_length=1, description="Comment content")


class CommentUpdate(BaseModel):
    """Only the content of a comment can change."""
    content: str = Field(..., min_length=1, description="Comment content")


class CommentResponse(ResponseModel):
    id: str
    task_id: str
    user_id: str
    content: str
    created_at: UtcDateTime
    updated_at: UtcDateTime
