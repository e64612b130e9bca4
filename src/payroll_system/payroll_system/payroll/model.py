from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..employees.model import EmployeeRecord


@dataclass(frozen=True)
class EmployeeWithPayroll:
    """Read-model: an employee plus derived payroll figures (never persisted)."""

    record: EmployeeRecord
    tax: float
    net_salary: float

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def basic_salary(self) -> float:
        return self.record.basic_salary

    def to_dict(self) -> dict[str, Any]:
        data = self.record.to_dict()
        data["tax"] = self.tax
        data["netSalary"] = self.net_salary
        return data


@dataclass(frozen=True)
class PayrollSummary:
    headcount: int
    total_basic_salary: float
    total_tax: float
    total_net_salary: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "headcount": self.headcount,
            "totalBasicSalary": self.total_basic_salary,
            "totalTax": self.total_tax,
            "totalNetSalary": self.total_net_salary,
        }
