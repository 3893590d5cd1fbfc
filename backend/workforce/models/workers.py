"""Workers entity: optionally reports to one manager."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workforce.db.session import Base
from workforce.models.base import EntityMixin, SequenceIdentityMixin


class Workers(Base, SequenceIdentityMixin, EntityMixin):
    __tablename__ = "workers"
    __entity_name__ = "workers"
    __patchable__ = ("name", "age")

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)

    manager_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("manager.id"),
        nullable=True,
        index=True,
    )
    manager: Mapped[Optional["Manager"]] = relationship("Manager", back_populates="workers")
