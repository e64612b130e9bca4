from __future__ import annotations

import pytest

from src.payroll_system.payroll_system.employees.model import EmployeeRecord
from src.payroll_system.payroll_system.payroll.engine import (
    calculate_net_salary,
    calculate_tax,
    enrich_with_payroll,
)

SALARIES = [0.01, 1, 999.99, 4500.5, 5000, 123456.78, 1e9]


def test_example_figures():
    assert calculate_tax(5000) == 600
    assert calculate_net_salary(5000, 600) == 4400


@pytest.mark.parametrize("salary", SALARIES)
def test_tax_is_twelve_percent(salary):
    assert calculate_tax(salary) == pytest.approx(salary * 0.12, rel=1e-9)


@pytest.mark.parametrize("salary,tax", [(5000, 600), (4500.5, 540.06), (10, 0), (1, 2)])
def test_net_salary_is_exact_difference(salary, tax):
    assert calculate_net_salary(salary, tax) == salary - tax


@pytest.mark.parametrize("salary", SALARIES)
def test_tax_plus_net_gives_back_basic(salary):
    tax = calculate_tax(salary)
    assert calculate_net_salary(salary, tax) + tax == pytest.approx(salary, rel=1e-9)


def test_enrich_adds_payroll_and_keeps_record():
    record = EmployeeRecord(id=1, name="A", department="B", basic_salary=5000, extra={"notes": "x"})

    enriched = enrich_with_payroll(record)

    assert enriched.id == 1
    assert enriched.record is record
    assert enriched.to_dict() == {
        "id": 1,
        "name": "A",
        "department": "B",
        "basicSalary": 5000,
        "notes": "x",
        "tax": 600,
        "netSalary": 4400,
    }
    assert record.to_dict() == {"id": 1, "name": "A", "department": "B", "basicSalary": 5000, "notes": "x"}
