"""Task service: CRUD, filtered lookups and search."""
from typing import List
import logging

from sqlmodel import select

from taskhub.models.task import Task
from taskhub.schemas.task import TaskCreate
from taskhub.services.base import EntityService
from taskhub.services.comment_service import CommentService

logger = logging.getLogger(__name__)


class TaskService(EntityService[Task]):
    """Service class for task CRUD operations with project, assignee, status and tag filters."""

    model = Task

    def create(self, data: TaskCreate) -> Task:
        return self._insert(data)

    def list_by_project(self, project_id: str) -> List[Task]:
        statement = select(Task).where(Task.project_id == project_id)
        return list(self.session.exec(statement).all())

    def list_by_assignee(self, assignee_id: str) -> List[Task]:
        statement = select(Task).where(Task.assignee_id == assignee_id)
        return list(self.session.exec(statement).all())

    def list_by_status(self, status: str) -> List[Task]:
        statement = select(Task).where(Task.status == status)
        return list(self.session.exec(statement).all())

    def list_by_tag(self, tag_id: str) -> List[Task]:
        """Get tasks whose tag set contains ``tag_id`` (exact membership, not substring)."""
        return [task for task in self.list() if tag_id in task.tags]

    def search(self, query: str) -> List[Task]:
        """Case-insensitive substring match against title or description."""
        needle = query.lower()
        return [
            task for task in self.list()
            if needle in task.title.lower() or needle in task.description.lower()
        ]

    def remove(self, task: Task) -> int:
        """
        Stage deletion of a task and its comments without committing

        Used by cascades that commit once for the whole operation.

        Returns:
            Number of comments removed
        """
        comments = CommentService(self.session).list_by_task(task.id)
        for comment in comments:
            self.session.delete(comment)
        self.session.delete(task)
        return len(comments)

    def delete(self, task_id: str) -> bool:
        """Delete a task and its comments."""
        task = self.get(task_id)
        if not task:
            return False

        removed = self.remove(task)
        self._commit()
        logger.info(f"Deleted task {task_id} and {removed} comment(s)")
        return True
