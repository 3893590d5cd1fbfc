"""SQLAlchemy models; relationship bookkeeping lives on the parent entities."""
from workforce.models.base import EntityMixin, SequenceIdentityMixin, UUIDIdentityMixin
from workforce.models.company import Company
from workforce.models.employee import Employee
from workforce.models.manager import Manager
from workforce.models.workers import Workers

__all__ = [
    "Company",
    "Employee",
    "EntityMixin",
    "Manager",
    "SequenceIdentityMixin",
    "UUIDIdentityMixin",
    "Workers",
]
