"""
Store facade

Owns the single database session for the process and exposes one service
per entity plus the statistics queries. Build it once at start-up and pass
it to everything that needs data; nothing looks it up globally.
"""
from sqlalchemy.engine import Engine
from sqlmodel import Session
import logging

from taskhub.services.comment_service import CommentService
from taskhub.services.project_service import ProjectService
from taskhub.services.statistics_service import StatisticsService
from taskhub.services.tag_service import TagService
from taskhub.services.task_service import TaskService
from taskhub.services.user_service import UserService

logger = logging.getLogger(__name__)


class Store:
    """Exclusive owner of all entity state."""

    def __init__(self, engine: Engine):
        self.engine = engine
        # Records handed out stay readable after commit
        self.session = Session(engine, expire_on_commit=False)

        self.users = UserService(self.session)
        self.projects = ProjectService(self.session)
        self.tasks = TaskService(self.session)
        self.tags = TagService(self.session)
        self.comments = CommentService(self.session)
        self.statistics = StatisticsService(self.session)

    def close(self) -> None:
        logger.info("Closing store session")
        self.session.close()
