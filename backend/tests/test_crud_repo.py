"""Repository port against SQLite: both identity strategies, sort, missing keys."""
import uuid

import pytest

from workforce.core.errors import ValidationError
from workforce.models import Company, Employee, Manager, Workers
from workforce.repositories import CrudRepository


def test_sequence_ids_increase(db):
    repo = CrudRepository(db, Workers)
    first = repo.save(Workers(name="a", age=20))
    second = repo.save(Workers(name="b", age=21))
    assert isinstance(first.id, int)
    assert second.id > first.id


def test_uuid_ids_are_canonical_strings(db):
    repo = CrudRepository(db, Manager)
    manager = repo.save(Manager(name="A", age=30, gender="M"))
    assert len(manager.id) == 36
    assert str(uuid.UUID(manager.id)) == manager.id


def test_find_by_id_accepts_uuid_objects(db):
    repo = CrudRepository(db, Manager)
    manager = repo.save(Manager(name="A", gender="M"))
    assert repo.find_by_id(uuid.UUID(manager.id)) is manager
    assert repo.find_by_id(manager.id) is manager


def test_find_by_id_missing_returns_none(db):
    assert CrudRepository(db, Company).find_by_id(999) is None
    assert CrudRepository(db, Manager).find_by_id(uuid.uuid4()) is None
    assert CrudRepository(db, Company).find_by_id(None) is None


def test_exists_and_count(db):
    repo = CrudRepository(db, Company)
    assert repo.count() == 0
    company = repo.save(Company(name="acme"))
    assert repo.count() == 1
    assert repo.exists_by_id(company.id)
    assert not repo.exists_by_id(company.id + 1)
    assert not repo.exists_by_id(None)


def test_save_with_id_replaces_every_attribute(db):
    repo = CrudRepository(db, Company)
    company = repo.save(Company(name="acme", place="Pune", domain="steel"))

    replaced = repo.save(Company(id=company.id, name="acme 2", place=None, domain=None))
    assert replaced.id == company.id
    assert replaced.name == "acme 2"
    assert replaced.place is None
    assert replaced.domain is None
    assert repo.count() == 1


def test_save_links_child_through_foreign_key(db):
    company = CrudRepository(db, Company).save(Company(name="acme"))
    employee = CrudRepository(db, Employee).save(Employee(name="e", company_id=company.id))
    assert employee.company == company


def test_find_all_sorted(db):
    repo = CrudRepository(db, Workers)
    for name in ("b", "c", "a"):
        repo.save(Workers(name=name))

    by_id_desc = repo.find_all([("id", True)])
    assert [w.id for w in by_id_desc] == sorted((w.id for w in by_id_desc), reverse=True)

    by_name = repo.find_all([("name", False)])
    assert [w.name for w in by_name] == ["a", "b", "c"]


def test_find_all_rejects_unknown_sort_attribute(db):
    with pytest.raises(ValidationError) as excinfo:
        CrudRepository(db, Workers).find_all([("salary", False)])
    assert excinfo.value.reason == "sortinvalid"
    assert excinfo.value.entity_name == "workers"


def test_delete_by_id(db):
    repo = CrudRepository(db, Workers)
    worker = repo.save(Workers(name="w"))
    repo.delete_by_id(worker.id)
    assert repo.count() == 0


def test_delete_missing_id_is_a_no_op(db):
    repo = CrudRepository(db, Manager)
    repo.delete_by_id(uuid.uuid4())
    assert repo.count() == 0


def test_deleting_parent_detaches_children(db):
    company = CrudRepository(db, Company).save(Company(name="acme"))
    employee = CrudRepository(db, Employee).save(Employee(name="e", company_id=company.id))

    CrudRepository(db, Company).delete_by_id(company.id)
    db.refresh(employee)
    assert employee.company_id is None
    assert employee.company is None
