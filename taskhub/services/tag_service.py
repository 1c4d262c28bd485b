"""Tag service."""
import logging

from taskhub.models.tag import Tag
from taskhub.schemas.tag import TagCreate
from taskhub.services.base import EntityService
from taskhub.services.task_service import TaskService

logger = logging.getLogger(__name__)


class TagService(EntityService[Tag]):
    """CRUD for tags. Deleting a tag detaches it from tasks; the tasks survive."""

    model = Tag
    tracks_updates = False

    def create(self, data: TagCreate) -> Tag:
        return self._insert(data)

    def delete(self, tag_id: str) -> bool:
        tag = self.get(tag_id)
        if not tag:
            return False

        tasks = TaskService(self.session)
        tagged = tasks.list_by_tag(tag_id)
        for task in tagged:
            tasks.stage_update(task, {"tags": [t for t in task.tags if t != tag_id]})

        self.session.delete(tag)
        self._commit()
        logger.info(f"Deleted tag {tag_id}, detached from {len(tagged)} task(s)")
        return True
