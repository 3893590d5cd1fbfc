"""Company endpoints under /api/companies."""
from __future__ import annotations

from workforce.models import Company
from workforce.routers.crud import Resource, SequencePathId, build_router
from workforce.schemas.company import CompanyPatch, CompanyRead, CompanyWrite

resource = Resource(
    plural="companies",
    model=Company,
    id_type=SequencePathId,
    write_schema=CompanyWrite,
    patch_schema=CompanyPatch,
    read_schema=CompanyRead,
)

router = build_router(resource)
