"""Identity strategies and identity-based equality shared by every entity."""
from __future__ import annotations

from uuid import uuid4

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

# BIGINT in Postgres; SQLite only autoincrements an INTEGER PRIMARY KEY
SequenceId = BigInteger().with_variant(Integer, "sqlite")


def gen_uuid():
    return str(uuid4())


class SequenceIdentityMixin:
    """Monotonically increasing integer id, assigned by the store on insert."""

    id: Mapped[int] = mapped_column(SequenceId, primary_key=True, autoincrement=True)


class UUIDIdentityMixin:
    """Random UUID id in canonical 36-char form, generated when the row is inserted."""

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=gen_uuid,
    )


class EntityMixin:
    """
    Equality by identity: two instances of the same entity type are equal only
    when both have an id and the ids match. An unsaved instance equals nothing
    but itself.

    The hash is constant per type so an instance stays in its set bucket when
    the store assigns its id.
    """

    __entity_name__ = ""
    # Scalar attributes merged by a partial update
    __patchable__ = ()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, type(self)):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in ("id", *self.__patchable__))
        return f"{type(self).__name__}({fields})"
