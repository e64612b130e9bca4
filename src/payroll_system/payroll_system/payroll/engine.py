"""Pure payroll functions: no I/O, no shared state."""
from __future__ import annotations

from typing import Optional

from ..employees.model import EmployeeRecord
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import EmployeeWithPayroll

_standard = StandardPayrollCalculator()


def calculate_tax(basic_salary: float) -> float:
    return _standard.tax(basic_salary)


def calculate_net_salary(basic_salary: float, tax: float) -> float:
    return _standard.net_salary(basic_salary, tax)


def enrich_with_payroll(record: EmployeeRecord, calculator: Optional[PayrollCalculator] = None) -> EmployeeWithPayroll:
    """Attach tax and net salary to a record. The record itself is left untouched."""
    calc = calculator or _standard
    tax = calc.tax(record.basic_salary)
    return EmployeeWithPayroll(record=record, tax=tax, net_salary=calc.net_salary(record.basic_salary, tax))
