"""Entity services and the Store facade that composes them."""
from taskhub.services.comment_service import CommentService
from taskhub.services.project_service import ProjectService
from taskhub.services.statistics_service import StatisticsService
from taskhub.services.store import Store
from taskhub.services.tag_service import TagService
from taskhub.services.task_service import TaskService
from taskhub.services.user_service import UserService

__all__ = [
    "CommentService",
    "ProjectService",
    "StatisticsService",
    "Store",
    "TagService",
    "TaskService",
    "UserService",
]
