"""Employee endpoints under /api/employees; `company` is written as {"id": ...} or null."""
from __future__ import annotations

from workforce.models import Company, Employee
from workforce.routers.crud import Resource, SequencePathId, build_router
from workforce.schemas.employee import EmployeePatch, EmployeeRead, EmployeeWrite

resource = Resource(
    plural="employees",
    model=Employee,
    id_type=SequencePathId,
    write_schema=EmployeeWrite,
    patch_schema=EmployeePatch,
    read_schema=EmployeeRead,
    references={"company": ("company_id", Company)},
)

router = build_router(resource)
