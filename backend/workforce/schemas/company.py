"""Company request/response bodies. Employees are not serialised on a company."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from workforce.schemas.common import Int64


class CompanyWrite(BaseModel):
    """Full body for create (no id) and update (id required by the service)."""

    id: Int64 | None = None
    name: str
    place: str | None = None
    domain: str | None = None


class CompanyPatch(BaseModel):
    id: Int64 | None = None
    name: str | None = None
    place: str | None = None
    domain: str | None = None


class CompanyRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    place: str | None = None
    domain: str | None = None
