"""
REST endpoints shared by every entity: POST, PUT, PATCH, GET (list and one), DELETE.

Each entity router is built from a `Resource` describing its schemas, id type
and references to parent entities. Annotations in this module must stay real
objects (no postponed evaluation) because FastAPI reads them from closures.
"""
from dataclasses import dataclass, field
from typing import Annotated, Any, Optional

from fastapi import APIRouter, HTTPException, Path, Query, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from workforce.core.config import get_settings
from workforce.core.logging import get_logger
from workforce.db.session import get_db
from workforce.repositories import CrudRepository, normalize_id
from workforce.schemas.common import INT64_MAX, INT64_MIN
from workforce.services.entity_service import EntityAlert, EntityService, log_alert
from workforce.services.validation import check_exists, check_new, check_path_id, parse_sort

logger = get_logger(__name__)

# Path id for sequential identities; out-of-range values are rejected before the store
SequencePathId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


@dataclass(frozen=True)
class Resource:
    plural: str
    model: type
    id_type: Any
    write_schema: type[BaseModel]
    patch_schema: type[BaseModel]
    read_schema: type[BaseModel]
    # body field -> (foreign key attribute, parent model)
    references: dict[str, tuple[str, type]] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return self.model.__name__

    @property
    def entity_name(self) -> str:
        return self.model.__entity_name__

    @property
    def path(self) -> str:
        return f"/api/{self.plural}"

    def scalar_values(self, body: BaseModel) -> dict[str, Any]:
        values = {name: getattr(body, name) for name in self.model.__patchable__}
        values["id"] = normalize_id(body.id)
        return values

    def to_entity(self, db: Session, body: BaseModel):
        """Full entity from a create/update body; parent references must exist."""
        values = self.scalar_values(body)
        for name, (foreign_key, parent) in self.references.items():
            ref = getattr(body, name)
            if ref is None:
                values[foreign_key] = None
                continue
            check_exists(CrudRepository(db, parent), ref.id)
            values[foreign_key] = normalize_id(ref.id)
        return self.model(**values)

    def to_patch(self, body: BaseModel):
        """Transient entity carrying only the patchable attributes; never added to a session."""
        return self.model(**self.scalar_values(body))


class AlertCollector:
    """Notifier that logs each alert and keeps it for the response headers."""

    def __init__(self) -> None:
        self.alerts: list[EntityAlert] = []

    def __call__(self, alert: EntityAlert) -> None:
        log_alert(alert)
        self.alerts.append(alert)

    def apply(self, response: Response) -> None:
        app_name = get_settings().application_name
        for alert in self.alerts:
            response.headers[f"X-{app_name}-alert"] = f"{app_name}.{alert.entity_name}.{alert.action}"
            response.headers[f"X-{app_name}-params"] = alert.entity_id


def build_router(resource: Resource) -> APIRouter:
    router = APIRouter(prefix=resource.path, tags=[resource.plural])
    label = resource.label
    IdType = resource.id_type
    WriteBody = resource.write_schema
    PatchBody = resource.patch_schema
    ReadModel = resource.read_schema

    def service_for(db: Session, alerts: AlertCollector) -> EntityService:
        return EntityService(CrudRepository(db, resource.model), notify=alerts)

    @router.post("", status_code=201, response_model=ReadModel)
    def create(body: WriteBody, response: Response):
        """Create a new entity. 400 if the body already has an id."""
        logger.debug(f"REST request to save {label} : {body}")
        alerts = AlertCollector()
        with get_db() as db:
            # Own identity first, parent references after
            check_new(resource.entity_name, body.id)
            entity = service_for(db, alerts).create(resource.to_entity(db, body))
            result = ReadModel.model_validate(entity)
        response.headers["Location"] = f"{resource.path}/{result.id}"
        alerts.apply(response)
        return result

    @router.put("/{entity_id}", response_model=ReadModel)
    def update(entity_id: IdType, body: WriteBody, response: Response):
        """Replace an existing entity. 400 if the id is missing, differs from the path, or is unknown."""
        logger.debug(f"REST request to update {label} : {entity_id}, {body}")
        alerts = AlertCollector()
        with get_db() as db:
            check_path_id(resource.entity_name, entity_id, body.id)
            check_exists(CrudRepository(db, resource.model), entity_id)
            entity = service_for(db, alerts).update(entity_id, resource.to_entity(db, body))
            result = ReadModel.model_validate(entity)
        alerts.apply(response)
        return result

    @router.patch("/{entity_id}", response_model=ReadModel)
    def partial_update(entity_id: IdType, body: PatchBody, response: Response):
        """Merge the non-null fields of the body into the stored entity."""
        logger.debug(f"REST request to partial update {label} partially : {entity_id}, {body}")
        alerts = AlertCollector()
        with get_db() as db:
            entity = service_for(db, alerts).partial_update(entity_id, resource.to_patch(body))
            result = ReadModel.model_validate(entity)
        alerts.apply(response)
        return result

    @router.get("", response_model=list[ReadModel])
    def get_all(sort: Optional[list[str]] = Query(None)):
        """All entities; `sort=field,desc` may be repeated."""
        logger.debug(f"REST request to get all {label}")
        order = parse_sort(resource.entity_name, sort)
        with get_db() as db:
            entities = service_for(db, AlertCollector()).get_all(order)
            return [ReadModel.model_validate(e) for e in entities]

    @router.get("/{entity_id}", response_model=ReadModel)
    def get_one(entity_id: IdType):
        logger.debug(f"REST request to get {label} : {entity_id}")
        with get_db() as db:
            entity = service_for(db, AlertCollector()).get_by_id(entity_id)
            result = ReadModel.model_validate(entity) if entity is not None else None
        if result is None:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        return result

    @router.delete("/{entity_id}", status_code=204)
    def delete(entity_id: IdType):
        logger.debug(f"REST request to delete {label} : {entity_id}")
        alerts = AlertCollector()
        with get_db() as db:
            service_for(db, alerts).delete_by_id(entity_id)
        response = Response(status_code=204)
        alerts.apply(response)
        return response

    return router
