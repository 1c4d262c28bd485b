"""Pydantic schemas for create, patch and response payloads."""
from taskhub.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from taskhub.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from taskhub.schemas.tag import TagCreate, TagResponse, TagUpdate
from taskhub.schemas.task import TaskChanges, TaskCreate, TaskResponse, TaskUpdate
from taskhub.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "CommentCreate",
    "CommentResponse",
    "CommentUpdate",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "TagCreate",
    "TagResponse",
    "TagUpdate",
    "TaskChanges",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
