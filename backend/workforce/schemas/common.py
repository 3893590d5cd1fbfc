"""Reference shapes used when a child entity points at its parent."""
from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Sequential ids and other BIGINT columns; larger values cannot reach the store
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class SequenceRef(BaseModel):
    """`{"id": 1}` pointing at an entity with a sequential id."""

    id: Int64


class UUIDRef(BaseModel):
    """`{"id": "<uuid>"}` pointing at an entity with a UUID id."""

    id: UUID
