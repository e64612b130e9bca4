from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.employees.service import EmployeeForm

DEMO_EMPLOYEES = [
    EmployeeForm(name="John Doe", department="Engineering", basic_salary="5000", selected_avatar="12", day="3", month="1", year="2022"),
    EmployeeForm(name="Jane Smith", department="Marketing", basic_salary="4500", gender="Female", selected_avatar="5", day="15", month="6", year="2023"),
    EmployeeForm(name="Ahmed Khan", department="Finance", basic_salary="6200", selected_avatar="33", notes="Team lead"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)

    if container.employee_service.list_employees():
        print(f"SKIP: {settings.DATA_FILE} already has employees")
        return

    for form in DEMO_EMPLOYEES:
        container.employee_service.create(form)

    print(f"OK: Seeded {len(DEMO_EMPLOYEES)} employees -> {settings.DATA_FILE}")


if __name__ == "__main__":
    main()
