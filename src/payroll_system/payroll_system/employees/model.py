from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

REQUIRED_KEYS = ("id", "name", "department", "basicSalary")


@dataclass(frozen=True)
class EmployeeRecord:
    """Domain entity: one stored employee.

    ``extra`` holds pass-through fields (profileImage, gender, startDate, notes and
    any unknown key) exactly as they appear in the JSON document.
    """

    id: int
    name: str
    department: str
    basic_salary: float
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def profile_image(self) -> Optional[str]:
        return self.extra.get("profileImage")

    @property
    def gender(self) -> Optional[str]:
        return self.extra.get("gender")

    @property
    def start_date(self) -> Optional[str]:
        return self.extra.get("startDate")

    @property
    def notes(self) -> Optional[str]:
        return self.extra.get("notes")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "basicSalary": self.basic_salary,
        }
        for key, value in self.extra.items():
            if key not in data:
                data[key] = copy.deepcopy(value)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "EmployeeRecord":
        """Build a record from one element of the JSON array.

        Raises ValueError when the element does not look like an employee record.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Employee record must be an object, got {type(data).__name__}")

        missing = [k for k in REQUIRED_KEYS if k not in data]
        if missing:
            raise ValueError(f"Employee record is missing {', '.join(missing)}")

        emp_id = data["id"]
        if isinstance(emp_id, bool) or not isinstance(emp_id, int):
            raise ValueError(f"Employee id must be an integer, got {emp_id!r}")

        salary = data["basicSalary"]
        if isinstance(salary, bool) or not isinstance(salary, (int, float)):
            raise ValueError(f"basicSalary must be a number, got {salary!r}")

        if not isinstance(data["name"], str) or not isinstance(data["department"], str):
            raise ValueError("name and department must be strings")

        extra = {k: copy.deepcopy(v) for k, v in data.items() if k not in REQUIRED_KEYS}
        return cls(
            id=emp_id,
            name=data["name"],
            department=data["department"],
            basic_salary=salary,
            extra=extra,
        )
