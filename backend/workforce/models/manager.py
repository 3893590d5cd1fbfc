"""Manager entity: UUID identity, owns a set of workers."""
from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workforce.db.session import Base
from workforce.models.base import EntityMixin, UUIDIdentityMixin

# Advisory age range; checked on create/update requests, not by the store
MIN_AGE = 20
MAX_AGE = 50


class Manager(Base, UUIDIdentityMixin, EntityMixin):
    __tablename__ = "manager"
    __entity_name__ = "manager"
    __patchable__ = ("name", "age", "gender")

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gender: Mapped[str] = mapped_column(String(255), nullable=False)

    workers: Mapped[set] = relationship(
        "Workers",
        back_populates="manager",
        collection_class=set,
    )

    def add_worker(self, worker) -> None:
        self.workers.add(worker)
        worker.manager = self

    def remove_worker(self, worker) -> None:
        self.workers.discard(worker)
        if worker.manager is self:
            worker.manager = None

    def replace_workers(self, workers: Optional[Iterable]) -> None:
        incoming = set(workers) if workers is not None else set()
        for worker in set(self.workers) - incoming:
            worker.manager = None
        for worker in incoming:
            worker.manager = self
        self.workers = incoming
