from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

NAME_REQUIRED = "Name is required and cannot be empty"
DEPARTMENT_REQUIRED = "Department is required and cannot be empty"
SALARY_NOT_POSITIVE = "Basic Salary must be a positive number"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...] = ()


def is_blank(value: Any) -> bool:
    """True for None, non-strings, empty and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def parse_salary(value: Any) -> Optional[float]:
    """Parse a salary from form/JSON input; None when it is not a finite number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_employee_input(name: Any, department: Any, basic_salary: Any) -> ValidationResult:
    """Check the three payroll fields and collect every problem found.

    All checks always run so the caller can show each error in one round trip.
    The inputs are never trimmed or modified here.
    """
    errors: list[str] = []

    if is_blank(name):
        errors.append(NAME_REQUIRED)

    if is_blank(department):
        errors.append(DEPARTMENT_REQUIRED)

    salary = parse_salary(basic_salary)
    if salary is None or salary <= 0:
        errors.append(SALARY_NOT_POSITIVE)

    return ValidationResult(valid=not errors, errors=tuple(errors))


def clean_text(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()
