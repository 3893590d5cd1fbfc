"""Identity checks, patch merge and change notifications of the generic service."""
import uuid

import pytest

from workforce.core.errors import ConflictError, NotFoundError, ValidationError
from workforce.models import Company, Employee, Manager, Workers
from workforce.repositories import CrudRepository
from workforce.services.entity_service import EntityAlert, EntityService


@pytest.fixture
def alerts():
    return []


def service_for(db, model, alerts):
    return EntityService(CrudRepository(db, model), notify=alerts.append)


def test_create_assigns_identity_and_notifies(db, alerts):
    service = service_for(db, Manager, alerts)
    manager = service.create(Manager(name="A", age=30, gender="M"))
    assert manager.id is not None
    assert alerts == [EntityAlert("created", "manager", manager.id)]


def test_create_calls_are_independent(db, alerts):
    service = service_for(db, Workers, alerts)
    first = service.create(Workers(name="w", age=20))
    second = service.create(Workers(name="w", age=20))
    assert first.id != second.id
    assert service.repository.count() == 2


def test_create_with_id_is_rejected(db, alerts):
    service = service_for(db, Company, alerts)
    with pytest.raises(ConflictError) as excinfo:
        service.create(Company(id=7, name="acme"))
    assert isinstance(excinfo.value, ValidationError)
    assert excinfo.value.reason == "idexists"
    assert service.repository.count() == 0
    assert alerts == []


def test_round_trip_through_get_by_id(db, alerts):
    service = service_for(db, Employee, alerts)
    created = service.create(Employee(name="e", age=40, gender="F", pancard=1234567890123))
    db.expunge_all()

    loaded = service.get_by_id(created.id)
    assert (loaded.name, loaded.age, loaded.gender, loaded.pancard) == ("e", 40, "F", 1234567890123)


def test_get_by_id_missing_returns_none(db, alerts):
    assert service_for(db, Manager, alerts).get_by_id(uuid.uuid4()) is None


def test_update_replaces_entity(db, alerts):
    service = service_for(db, Company, alerts)
    company = service.create(Company(name="acme", place="Pune"))

    updated = service.update(company.id, Company(id=company.id, name="acme 2", place=None, domain="steel"))
    assert (updated.name, updated.place, updated.domain) == ("acme 2", None, "steel")
    assert alerts[-1] == EntityAlert("updated", "company", str(company.id))


def test_update_requires_body_id(db, alerts):
    service = service_for(db, Company, alerts)
    with pytest.raises(ValidationError) as excinfo:
        service.update(1, Company(name="acme"))
    assert excinfo.value.reason == "idnull"


def test_update_rejects_id_mismatch(db, alerts):
    service = service_for(db, Workers, alerts)
    worker = service.create(Workers(name="w"))
    with pytest.raises(ValidationError) as excinfo:
        service.update(worker.id + 1, Workers(id=worker.id, name="x"))
    assert excinfo.value.reason == "idinvalid"
    assert service.get_by_id(worker.id).name == "w"


def test_update_unknown_id_is_not_found(db, alerts):
    service = service_for(db, Workers, alerts)
    with pytest.raises(NotFoundError) as excinfo:
        service.update(99, Workers(id=99, name="x"))
    assert excinfo.value.reason == "idnotfound"
    assert service.repository.count() == 0


def test_uuid_path_and_body_ids_compare_by_value(db, alerts):
    service = service_for(db, Manager, alerts)
    manager = service.create(Manager(name="A", gender="M"))

    updated = service.update(uuid.UUID(manager.id), Manager(id=manager.id, name="B", gender="F"))
    assert updated.name == "B"


def test_partial_update_merges_non_null_attributes(db, alerts):
    service = service_for(db, Manager, alerts)
    stored = service.create(Manager(name="A", age=30, gender="M"))

    merged = service.partial_update(stored.id, Manager(id=stored.id, age=31))
    assert (merged.name, merged.age, merged.gender) == ("A", 31, "M")
    assert alerts[-1].action == "updated"


@pytest.mark.parametrize(
    "patch",
    [
        {"name": "new"},
        {"place": "Delhi", "domain": None},
        {"name": None, "place": None, "domain": None},
        {"name": "n", "place": "p", "domain": "d"},
    ],
)
def test_patch_merge_law(db, alerts, patch):
    service = service_for(db, Company, alerts)
    stored = service.create(Company(name="acme", place="Pune", domain="steel"))
    before = {a: getattr(stored, a) for a in ("name", "place", "domain")}

    merged = service.partial_update(stored.id, Company(id=stored.id, **patch))
    for attribute, old in before.items():
        expected = patch.get(attribute) if patch.get(attribute) is not None else old
        assert getattr(merged, attribute) == expected


def test_partial_update_checks_identity(db, alerts):
    service = service_for(db, Employee, alerts)
    with pytest.raises(ValidationError):
        service.partial_update(1, Employee(name="x"))
    with pytest.raises(ValidationError):
        service.partial_update(1, Employee(id=2, name="x"))
    with pytest.raises(NotFoundError):
        service.partial_update(3, Employee(id=3, name="x"))


def test_partial_update_leaves_relationships_alone(db, alerts):
    company = service_for(db, Company, alerts).create(Company(name="acme"))
    service = service_for(db, Employee, alerts)
    employee = service.create(Employee(name="e", company_id=company.id))

    merged = service.partial_update(employee.id, Employee(id=employee.id, age=33))
    assert merged.company == company
    assert merged.age == 33


def test_get_all_honours_sort(db, alerts):
    service = service_for(db, Company, alerts)
    for name in ("b", "a", "c"):
        service.create(Company(name=name))
    assert [c.name for c in service.get_all([("name", True)])] == ["c", "b", "a"]


def test_delete_is_idempotent(db, alerts):
    service = service_for(db, Workers, alerts)
    worker = service.create(Workers(name="w"))

    service.delete_by_id(worker.id)
    service.delete_by_id(worker.id)
    assert service.get_by_id(worker.id) is None
    assert [a.action for a in alerts] == ["created", "deleted", "deleted"]
