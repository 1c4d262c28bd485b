"""Project service."""
from typing import List
import logging

from sqlmodel import select

from taskhub.models.project import Project
from taskhub.schemas.project import ProjectCreate
from taskhub.services.base import EntityService
from taskhub.services.task_service import TaskService

logger = logging.getLogger(__name__)


class ProjectService(EntityService[Project]):
    """CRUD for projects; deleting a project cascades to its tasks and their comments."""

    model = Project

    def create(self, data: ProjectCreate) -> Project:
        return self._insert(data)

    def list_by_owner(self, owner_id: str) -> List[Project]:
        """Get all projects owned by a user."""
        statement = select(Project).where(Project.owner_id == owner_id)
        return list(self.session.exec(statement).all())

    def delete(self, project_id: str) -> bool:
        """
        Delete a project together with its tasks and their comments

        Returns:
            True if the project existed, False otherwise
        """
        project = self.get(project_id)
        if not project:
            return False

        tasks = TaskService(self.session)
        children = tasks.list_by_project(project_id)
        for task in children:
            tasks.remove(task)

        self.session.delete(project)
        self._commit()
        logger.info(f"Deleted project {project_id} and {len(children)} task(s)")
        return True
