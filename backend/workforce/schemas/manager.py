"""Manager bodies. Ids travel as canonical UUID strings; workers are not serialised."""
from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workforce.models.manager import MAX_AGE, MIN_AGE


class ManagerWrite(BaseModel):
    id: UUID | None = None
    name: str | None = None
    age: int | None = Field(None, ge=MIN_AGE, le=MAX_AGE)
    gender: str


class ManagerPatch(BaseModel):
    # Partial updates skip the age range, as the stored column does
    id: UUID | None = None
    name: str | None = None
    age: int | None = None
    gender: str | None = None


class ManagerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str | None = None
    age: int | None = None
    gender: str
