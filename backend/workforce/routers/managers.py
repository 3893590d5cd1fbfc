"""Manager endpoints under /api/managers; ids are UUIDs."""
from __future__ import annotations

from uuid import UUID

from workforce.models import Manager
from workforce.routers.crud import Resource, build_router
from workforce.schemas.manager import ManagerPatch, ManagerRead, ManagerWrite

resource = Resource(
    plural="managers",
    model=Manager,
    id_type=UUID,
    write_schema=ManagerWrite,
    patch_schema=ManagerPatch,
    read_schema=ManagerRead,
)

router = build_router(resource)
