"""Workers endpoints under /api/workers; `manager` is written as {"id": "<uuid>"} or null."""
from __future__ import annotations

from workforce.models import Manager, Workers
from workforce.routers.crud import Resource, SequencePathId, build_router
from workforce.schemas.workers import WorkersPatch, WorkersRead, WorkersWrite

resource = Resource(
    plural="workers",
    model=Workers,
    id_type=SequencePathId,
    write_schema=WorkersWrite,
    patch_schema=WorkersPatch,
    read_schema=WorkersRead,
    references={"manager": ("manager_id", Manager)},
)

router = build_router(resource)
