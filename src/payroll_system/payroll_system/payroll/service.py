from __future__ import annotations

from typing import Iterable, Optional

from ..employees.model import EmployeeRecord
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .engine import enrich_with_payroll
from .model import EmployeeWithPayroll, PayrollSummary


class PayrollService:
    def __init__(self, *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or StandardPayrollCalculator()

    def enrich(self, record: EmployeeRecord) -> EmployeeWithPayroll:
        return enrich_with_payroll(record, self._calculator)

    def enrich_all(self, records: Iterable[EmployeeRecord]) -> list[EmployeeWithPayroll]:
        return [self.enrich(r) for r in records]

    def summarize(self, records: Iterable[EmployeeRecord]) -> PayrollSummary:
        rows = self.enrich_all(records)
        return PayrollSummary(
            headcount=len(rows),
            total_basic_salary=sum(r.basic_salary for r in rows),
            total_tax=sum(r.tax for r in rows),
            total_net_salary=sum(r.net_salary for r in rows),
        )
