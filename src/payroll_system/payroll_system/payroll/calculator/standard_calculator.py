from __future__ import annotations

from ...core.constants import TAX_RATE
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: flat tax on basic salary, net = basic - tax. No rounding."""

    def __init__(self, tax_rate: float = TAX_RATE):
        self._tax_rate = tax_rate

    @property
    def tax_rate(self) -> float:
        return self._tax_rate

    def tax(self, basic_salary: float) -> float:
        return basic_salary * self._tax_rate

    def net_salary(self, basic_salary: float, tax: float) -> float:
        return basic_salary - tax
