"""
Generic resource service: create, update, partial update, read and delete for
any entity type, whatever its identity strategy.

The service holds no state between calls beyond its collaborators, which are
built per request, so concurrent requests never share mutable fields.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from workforce.core.logging import get_logger
from workforce.repositories import CrudRepository
from workforce.services.validation import check_exists, check_new, check_path_id

logger = get_logger(__name__)

T = TypeVar("T")
K = TypeVar("K")


@dataclass(frozen=True)
class EntityAlert:
    """Change notification emitted after every successful create, update or delete."""

    action: str  # created | updated | deleted
    entity_name: str
    entity_id: str


def log_alert(alert: EntityAlert) -> None:
    logger.info(f"{alert.entity_name} {alert.entity_id} {alert.action}")


class EntityService(Generic[T, K]):
    def __init__(
        self,
        repository: CrudRepository[T, K],
        notify: Optional[Callable[[EntityAlert], None]] = None,
    ) -> None:
        self.repository = repository
        self.entity_name: str = repository.model.__entity_name__
        self.patchable: tuple[str, ...] = tuple(repository.model.__patchable__)
        self.notify = notify or log_alert

    def _emit(self, action: str, entity_id: Any) -> None:
        self.notify(EntityAlert(action, self.entity_name, str(entity_id)))

    def create(self, entity: T) -> T:
        """Persist a new entity; the store assigns its identity."""
        check_new(self.entity_name, entity.id)
        entity = self.repository.save(entity)
        self._emit("created", entity.id)
        return entity

    def update(self, path_id: K, entity: T) -> T:
        """Replace the stored entity `path_id` with `entity` as a whole."""
        check_path_id(self.entity_name, path_id, entity.id)
        check_exists(self.repository, path_id)
        entity = self.repository.save(entity)
        self._emit("updated", entity.id)
        return entity

    def partial_update(self, path_id: K, patch: T) -> T:
        """
        Merge `patch` into the stored entity. Every patchable attribute that is
        not None on `patch` overwrites the stored value; None means "leave as
        is", so a field cannot be cleared this way. Relationships are not merged.
        """
        check_path_id(self.entity_name, path_id, patch.id)
        check_exists(self.repository, path_id)

        existing = self.repository.find_by_id(patch.id)
        for attribute in self.patchable:
            value = getattr(patch, attribute)
            if value is not None:
                setattr(existing, attribute, value)
        existing = self.repository.save(existing)
        self._emit("updated", existing.id)
        return existing

    def get_all(self, sort: Sequence[tuple[str, bool]] = ()) -> list[T]:
        return self.repository.find_all(sort)

    def get_by_id(self, entity_id: K) -> T | None:
        """The stored entity, or None when there is none; never raises for a missing id."""
        return self.repository.find_by_id(entity_id)

    def delete_by_id(self, entity_id: K) -> None:
        self.repository.delete_by_id(entity_id)
        self._emit("deleted", entity_id)
