"""SQLModel table definitions for the task tracker."""
from taskhub.models.comment import Comment
from taskhub.models.common import new_id, utcnow
from taskhub.models.project import Project, ProjectStatus
from taskhub.models.tag import Tag
from taskhub.models.task import Task, TaskPriority, TaskStatus
from taskhub.models.user import User, UserRole

__all__ = [
    "Comment",
    "Project",
    "ProjectStatus",
    "Tag",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "User",
    "UserRole",
    "new_id",
    "utcnow",
]
