"""Employee entity: optionally belongs to one company."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workforce.db.session import Base
from workforce.models.base import EntityMixin, SequenceId, SequenceIdentityMixin


class Employee(Base, SequenceIdentityMixin, EntityMixin):
    __tablename__ = "employee"
    __entity_name__ = "employee"
    __patchable__ = ("name", "age", "gender", "pancard")

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pancard: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    company_id: Mapped[int | None] = mapped_column(
        SequenceId,
        ForeignKey("company.id"),
        nullable=True,
        index=True,
    )
    company: Mapped[Optional["Company"]] = relationship("Company", back_populates="employees")
