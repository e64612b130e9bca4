from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def tax(self, basic_salary: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def net_salary(self, basic_salary: float, tax: float) -> float:
        raise NotImplementedError
