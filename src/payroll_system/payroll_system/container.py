from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.service import EmployeeService
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: JsonEmployeeRepository

    payroll_service: PayrollService
    employee_service: EmployeeService


def build_container(*, data_file: Union[str, Path]) -> Container:
    employees_repo = JsonEmployeeRepository(data_file)

    payroll_service = PayrollService()
    employee_service = EmployeeService(employees_repo, payroll=payroll_service)

    return Container(
        employees_repo=employees_repo,
        payroll_service=payroll_service,
        employee_service=employee_service,
    )
