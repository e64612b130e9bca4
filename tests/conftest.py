from __future__ import annotations

import pytest

from src.payroll_system.payroll_system.employees.json_employee_repository import JsonEmployeeRepository
from src.payroll_system.payroll_system.employees.model import EmployeeRecord


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "employees.json"


@pytest.fixture
def repo(data_file):
    return JsonEmployeeRepository(data_file)


@pytest.fixture
def sample_records():
    return [
        EmployeeRecord(
            id=1700000000001,
            name="John Doe",
            department="Engineering",
            basic_salary=5000,
            extra={
                "profileImage": "https://i.pravatar.cc/150?img=12",
                "gender": "Male",
                "startDate": "3 Jan 2022",
                "notes": "",
            },
        ),
        EmployeeRecord(id=1700000000002, name="Jane Smith", department="Marketing", basic_salary=4500.5),
    ]


@pytest.fixture
def app(monkeypatch, data_file):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.payroll_system.payroll_system.main import create_app

    return create_app({"DATA_FILE": str(data_file)})


@pytest.fixture
def client(app):
    return app.test_client()
