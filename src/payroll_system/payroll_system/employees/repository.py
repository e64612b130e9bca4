from __future__ import annotations

from typing import Protocol, Sequence

from .model import EmployeeRecord


class EmployeeRepository(Protocol):
    """Repository interface for the employee collection.

    Whole-collection semantics only: read everything, replace everything.
    """

    def load_all(self) -> list[EmployeeRecord]:
        raise NotImplementedError

    def save_all(self, records: Sequence[EmployeeRecord]) -> None:
        raise NotImplementedError
