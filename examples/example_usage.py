"""Example: use the service layer without Flask.

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    for row in container.employee_service.list_with_payroll():
        print(row.to_dict())
    print(container.payroll_service.summarize(container.employee_service.list_employees()).to_dict())


if __name__ == "__main__":
    main()
