"""Workers bodies; the manager is nested by reference on write, in full on read."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from workforce.schemas.common import Int64, UUIDRef
from workforce.schemas.manager import ManagerRead


class WorkersWrite(BaseModel):
    id: Int64 | None = None
    name: str | None = None
    age: int | None = None
    manager: UUIDRef | None = None


class WorkersPatch(BaseModel):
    id: Int64 | None = None
    name: str | None = None
    age: int | None = None


class WorkersRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    age: int | None = None
    manager: ManagerRead | None = None
