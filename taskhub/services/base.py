"""Shared plumbing for the entity services."""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging

from pydantic import BaseModel
from sqlmodel import Session, SQLModel, select

from taskhub.models.common import utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class EntityService(Generic[ModelT]):
    """
    Base service for one entity collection

    Subclasses set ``model`` and may set ``tracks_updates = False`` for
    entities without an ``updated_at`` column. Every public mutation commits
    once; a failure rolls the session back so no partial change is visible.
    """

    model: Type[ModelT]
    tracks_updates: bool = True

    def __init__(self, session: Session):
        self.session = session

    def get(self, entity_id: str) -> Optional[ModelT]:
        """Get a record by ID, or None when it does not exist."""
        return self.session.get(self.model, entity_id)

    def list(self) -> List[ModelT]:
        """Get every record of this entity."""
        return list(self.session.exec(select(self.model)).all())

    def _insert(self, data: BaseModel) -> ModelT:
        now = utcnow()
        fields: Dict[str, Any] = data.model_dump()
        fields["created_at"] = now
        if self.tracks_updates:
            fields["updated_at"] = now
        record = self.model(**fields)
        self.session.add(record)
        self._commit()
        self.session.refresh(record)
        return record

    def stage_update(self, record: ModelT, changes: Dict[str, Any]) -> ModelT:
        """Set fields on a record and refresh updated_at; the caller commits."""
        for field, value in changes.items():
            setattr(record, field, value)
        if self.tracks_updates:
            record.updated_at = utcnow()
        self.session.add(record)
        return record

    def update(self, entity_id: str, patch: BaseModel) -> Optional[ModelT]:
        """
        Merge the fields set on ``patch`` over an existing record

        Args:
            entity_id: ID of the record to update
            patch: Schema instance; only explicitly set fields are applied

        Returns:
            The updated record, or None if the ID is unknown
        """
        record = self.get(entity_id)
        if record is None:
            return None

        self.stage_update(record, patch.model_dump(exclude_unset=True))
        self._commit()
        self.session.refresh(record)
        return record

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            logger.exception(f"{self.model.__name__} commit failed, rolling back")
            self.session.rollback()
            raise
