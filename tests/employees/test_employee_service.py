from __future__ import annotations

import random

import pytest

from src.payroll_system.payroll_system.common.id_generator import MonotonicIdGenerator
from src.payroll_system.payroll_system.common.validators import NAME_REQUIRED, SALARY_NOT_POSITIVE
from src.payroll_system.payroll_system.core.exceptions import PersistenceError, ValidationError
from src.payroll_system.payroll_system.employees.model import EmployeeRecord
from src.payroll_system.payroll_system.employees.service import EmployeeForm, EmployeeService


class InMemoryEmployees:
    def __init__(self, records=None):
        self.records = list(records or [])
        self.saves = 0

    def load_all(self):
        return list(self.records)

    def save_all(self, records):
        self.saves += 1
        self.records = list(records)


class FailingEmployees(InMemoryEmployees):
    def save_all(self, records):
        raise PersistenceError("disk full")


def make_service(repo, *, clock=lambda: 1_700_000_000_000):
    return EmployeeService(repo, id_generator=MonotonicIdGenerator(clock=clock), rng=random.Random(0))


def test_create_trims_and_fills_defaults():
    repo = InMemoryEmployees()
    svc = make_service(repo)

    record = svc.create(EmployeeForm(name="  John  ", department=" Sales ", basic_salary="5000", selected_avatar="12"))

    assert record.id == 1_700_000_000_000
    assert record.name == "John"
    assert record.department == "Sales"
    assert record.basic_salary == 5000.0
    assert record.profile_image == "https://i.pravatar.cc/150?img=12"
    assert record.gender == "Male"
    assert record.start_date == ""
    assert record.notes == ""
    assert repo.records == [record]


def test_create_keeps_optional_fields():
    svc = make_service(InMemoryEmployees())

    record = svc.create(EmployeeForm(
        name="Jane",
        department="Marketing",
        basic_salary=4500,
        profile_image="/uploads/profile-1.png",
        gender="Female",
        day="5",
        month="1",
        year="2024",
        notes="  remote  ",
    ))

    assert record.profile_image == "/uploads/profile-1.png"
    assert record.gender == "Female"
    assert record.start_date == "5 Jan 2024"
    assert record.notes == "remote"


def test_create_picks_random_avatar_when_none_selected():
    record = make_service(InMemoryEmployees()).create(EmployeeForm(name="A", department="B", basic_salary=1))
    n = int(record.profile_image.rsplit("=", 1)[1])
    assert 1 <= n <= 70


def test_create_never_reuses_existing_id():
    existing = EmployeeRecord(id=1_700_000_000_000, name="Old", department="X", basic_salary=1)
    repo = InMemoryEmployees([existing])

    record = make_service(repo).create(EmployeeForm(name="New", department="Y", basic_salary=2))

    assert record.id != existing.id
    assert len({r.id for r in repo.records}) == 2


def test_create_rejects_invalid_input_without_saving():
    repo = InMemoryEmployees()

    with pytest.raises(ValidationError) as exc:
        make_service(repo).create(EmployeeForm(name=" ", department="B", basic_salary="abc"))

    assert exc.value.errors == [NAME_REQUIRED, SALARY_NOT_POSITIVE]
    assert repo.saves == 0


def test_create_propagates_persistence_error():
    with pytest.raises(PersistenceError):
        make_service(FailingEmployees()).create(EmployeeForm(name="A", department="B", basic_salary=1))


def test_update_changes_payroll_fields_and_keeps_the_rest(sample_records):
    repo = InMemoryEmployees(sample_records)
    target = sample_records[0]

    updated = make_service(repo).update(target.id, name="  John Updated ", department=" Sales ", basic_salary="5500")

    assert updated.id == target.id
    assert updated.name == "John Updated"
    assert updated.department == "Sales"
    assert updated.basic_salary == 5500.0
    assert updated.extra == target.extra
    assert repo.records[0] == updated
    assert repo.records[1] == sample_records[1]


def test_update_unknown_id_returns_none(sample_records):
    repo = InMemoryEmployees(sample_records)

    assert make_service(repo).update(42, name="A", department="B", basic_salary=1) is None
    assert repo.saves == 0


def test_update_validates_before_loading(sample_records):
    repo = InMemoryEmployees(sample_records)

    with pytest.raises(ValidationError):
        make_service(repo).update(sample_records[0].id, name="A", department="", basic_salary=1)

    assert repo.records == sample_records


def test_delete(sample_records):
    repo = InMemoryEmployees(sample_records)
    svc = make_service(repo)

    assert svc.delete(sample_records[0].id) is True
    assert repo.records == sample_records[1:]
    assert svc.delete(sample_records[0].id) is False
    assert repo.saves == 1


def test_get_and_list_with_payroll(sample_records):
    svc = make_service(InMemoryEmployees(sample_records))

    assert svc.get(sample_records[1].id) == sample_records[1]
    assert svc.get(99) is None

    rows = svc.list_with_payroll()
    assert [r.id for r in rows] == [r.id for r in sample_records]
    assert rows[0].tax == 600
    assert rows[0].net_salary == 4400
