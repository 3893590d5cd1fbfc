"""Identity checks applied before anything reaches the store."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from workforce.core.errors import ConflictError, NotFoundError, ValidationError
from workforce.repositories import normalize_id


def check_new(entity_name: str, entity_id: Any) -> None:
    """A create request must leave identity assignment to the store."""
    if entity_id is not None:
        raise ConflictError(entity_name, f"A new {entity_name} cannot already have an ID")


def check_path_id(entity_name: str, path_id: Any, body_id: Any) -> None:
    """The body of an update must carry an id, and it must be the one in the path."""
    if body_id is None:
        raise ValidationError(entity_name, "idnull", "Invalid id")
    if normalize_id(path_id) != normalize_id(body_id):
        raise ValidationError(entity_name, "idinvalid", "Invalid ID")


def check_exists(repository, entity_id: Any) -> None:
    if not repository.exists_by_id(entity_id):
        raise NotFoundError(repository.entity_name)


def parse_sort(entity_name: str, params: Optional[Iterable[str]]) -> list[tuple[str, bool]]:
    """
    Parse `sort=field,dir` query values (dir is asc or desc, default asc).
    Returns (field, descending) pairs in request order.
    """
    order: list[tuple[str, bool]] = []
    for param in params or ():
        field, _, direction = param.partition(",")
        field = field.strip()
        direction = direction.strip().lower() or "asc"
        if not field or direction not in ("asc", "desc"):
            raise ValidationError(entity_name, "sortinvalid", f"Invalid sort parameter '{param}'")
        order.append((field, direction == "desc"))
    return order
