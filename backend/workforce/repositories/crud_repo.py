"""Generic repository: save/find/delete/exists/count for one entity type."""
from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import func, inspect, select
from sqlalchemy.orm import Session

from workforce.core.errors import ValidationError
from workforce.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
K = TypeVar("K")


def normalize_id(entity_id: Any) -> Any:
    """UUIDs are stored in canonical string form; everything else passes through."""
    if isinstance(entity_id, UUID):
        return str(entity_id)
    return entity_id


class CrudRepository(Generic[T, K]):
    """
    Persistence port bound to one request-scoped session and one model class.
    Nothing is committed here; get_db() commits when the request succeeds.
    """

    def __init__(self, db: Session, model: type[T]) -> None:
        self.db = db
        self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__entity_name__

    def save(self, entity: T) -> T:
        """
        Insert when the entity has no id yet (the identity strategy assigns one),
        otherwise replace the stored row with the entity's state.
        """
        if entity.id is None:
            self.db.add(entity)
            action = "Inserted"
        else:
            entity.id = normalize_id(entity.id)
            entity = self.db.merge(entity)
            action = "Replaced"
        self.db.flush()
        self.db.refresh(entity)
        logger.debug(f"{action} {entity!r}")
        return entity

    def find_by_id(self, entity_id: K) -> T | None:
        if entity_id is None:
            return None
        return self.db.get(self.model, normalize_id(entity_id))

    def find_all(self, sort: Sequence[tuple[str, bool]] = ()) -> list[T]:
        """
        All stored entities. `sort` is a sequence of (attribute, descending);
        without it the order is whatever the store returns.
        """
        columns = inspect(self.model).columns
        stmt = select(self.model)
        for attribute, descending in sort:
            if attribute not in columns:
                raise ValidationError(self.entity_name, "sortinvalid", f"Cannot sort by '{attribute}'")
            column = columns[attribute]
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        return list(self.db.scalars(stmt).all())

    def exists_by_id(self, entity_id: K) -> bool:
        if entity_id is None:
            return False
        pk = inspect(self.model).primary_key[0]
        stmt = select(func.count()).select_from(self.model).where(pk == normalize_id(entity_id))
        return self.db.scalar(stmt) > 0

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model))

    def delete_by_id(self, entity_id: K) -> None:
        """Delete the row if present; a missing id is not an error."""
        entity = self.find_by_id(entity_id)
        if entity is None:
            logger.debug(f"Delete skipped, no {self.entity_name} with id {entity_id}")
            return
        self.db.delete(entity)
        self.db.flush()
        logger.debug(f"Deleted {self.entity_name} {entity_id}")
