"""Comment service."""
from typing import List

from sqlmodel import select

from taskhub.models.comment import Comment
from taskhub.schemas.comment import CommentCreate
from taskhub.services.base import EntityService


class CommentService(EntityService[Comment]):
    """CRUD for comments. Per-task and per-user listings are ordered oldest first."""

    model = Comment

    def create(self, data: CommentCreate) -> Comment:
        return self._insert(data)

    def list_by_task(self, task_id: str) -> List[Comment]:
        statement = (
            select(Comment)
            .where(Comment.task_id == task_id)
            .order_by(Comment.created_at.asc())
        )
        return list(self.session.exec(statement).all())

    def list_by_user(self, user_id: str) -> List[Comment]:
        statement = (
            select(Comment)
            .where(Comment.user_id == user_id)
            .order_by(Comment.created_at.asc())
        )
        return list(self.session.exec(statement).all())

    def delete(self, comment_id: str) -> bool:
        comment = self.get(comment_id)
        if not comment:
            return False

        self.session.delete(comment)
        self._commit()
        return True
