"""Company entity: owns a set of employees."""
from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workforce.db.session import Base
from workforce.models.base import EntityMixin, SequenceIdentityMixin


class Company(Base, SequenceIdentityMixin, EntityMixin):
    __tablename__ = "company"
    __entity_name__ = "company"
    __patchable__ = ("name", "place", "domain")

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    place: Mapped[str | None] = mapped_column(String(255), nullable=True)
    domain: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Non-owning side; Employee.company_id holds the link
    employees: Mapped[set] = relationship(
        "Employee",
        back_populates="company",
        collection_class=set,
    )

    def add_employee(self, employee) -> None:
        """Link employee to this company; a no-op when already linked."""
        self.employees.add(employee)
        employee.company = self

    def remove_employee(self, employee) -> None:
        self.employees.discard(employee)
        if employee.company is self:
            employee.company = None

    def replace_employees(self, employees: Optional[Iterable]) -> None:
        """
        Make `employees` the whole collection. Employees dropped from the
        collection lose their company; None is an empty replacement.
        """
        incoming = set(employees) if employees is not None else set()
        for employee in set(self.employees) - incoming:
            employee.company = None
        for employee in incoming:
            employee.company = self
        self.employees = incoming
