"""Employee bodies; the company is nested by reference on write, in full on read."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from workforce.schemas.common import Int64, SequenceRef
from workforce.schemas.company import CompanyRead


class EmployeeWrite(BaseModel):
    id: Int64 | None = None
    name: str
    age: int | None = None
    gender: str | None = None
    pancard: Int64 | None = None
    company: SequenceRef | None = None


class EmployeePatch(BaseModel):
    id: Int64 | None = None
    name: str | None = None
    age: int | None = None
    gender: str | None = None
    pancard: Int64 | None = None


class EmployeeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    age: int | None = None
    gender: str | None = None
    pancard: int | None = None
    company: CompanyRead | None = None
