from __future__ import annotations

import dataclasses
import logging
import random
import threading
from dataclasses import dataclass
from typing import Any, Optional

from ..common.datetime_utils import format_start_date
from ..common.id_generator import MonotonicIdGenerator
from ..common.validators import clean_text, parse_salary, validate_employee_input
from ..core.constants import AVATAR_COUNT, AVATAR_URL_TEMPLATE
from ..core.enums import Gender
from ..core.exceptions import ValidationError
from ..payroll.model import EmployeeWithPayroll
from ..payroll.service import PayrollService
from .model import EmployeeRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeForm:
    """Raw values submitted by the add-employee form (nothing trimmed yet)."""

    name: Any
    department: Any
    basic_salary: Any
    profile_image: Optional[str] = None
    selected_avatar: Any = None
    gender: Optional[str] = None
    day: Any = None
    month: Any = None
    year: Any = None
    notes: Optional[str] = None


class EmployeeService:
    """Use case: manage employees on top of the whole-collection store.

    Each mutation runs load -> modify -> save while holding one lock, so requests
    served by this process cannot lose each other's updates.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        payroll: Optional[PayrollService] = None,
        id_generator: Optional[MonotonicIdGenerator] = None,
        rng: Optional[random.Random] = None,
    ):
        self._employees = employees
        self._payroll = payroll or PayrollService()
        self._ids = id_generator or MonotonicIdGenerator()
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    def list_employees(self) -> list[EmployeeRecord]:
        return self._employees.load_all()

    def list_with_payroll(self) -> list[EmployeeWithPayroll]:
        return self._payroll.enrich_all(self._employees.load_all())

    def get(self, employee_id: int) -> Optional[EmployeeRecord]:
        for record in self._employees.load_all():
            if record.id == employee_id:
                return record
        return None

    def create(self, form: EmployeeForm) -> EmployeeRecord:
        self._validate(form.name, form.department, form.basic_salary)

        with self._lock:
            records = self._employees.load_all()
            taken = {r.id for r in records}
            new_id = self._ids.next_id()
            while new_id in taken:
                new_id = self._ids.next_id()

            record = EmployeeRecord(
                id=new_id,
                name=form.name.strip(),
                department=form.department.strip(),
                basic_salary=parse_salary(form.basic_salary),
                extra={
                    "profileImage": self._resolve_profile_image(form),
                    "gender": clean_text(form.gender) or Gender.MALE.value,
                    "startDate": format_start_date(form.day, form.month, form.year),
                    "notes": clean_text(form.notes),
                },
            )
            self._employees.save_all([*records, record])

        logger.info("Created employee %s (%s)", record.id, record.name)
        return record

    def update(self, employee_id: int, *, name: Any, department: Any, basic_salary: Any) -> Optional[EmployeeRecord]:
        """Replace name, department and salary. Returns None when the id is unknown."""
        self._validate(name, department, basic_salary)

        with self._lock:
            records = self._employees.load_all()
            index = self._index_of(records, employee_id)
            if index is None:
                return None

            updated = dataclasses.replace(
                records[index],
                name=name.strip(),
                department=department.strip(),
                basic_salary=parse_salary(basic_salary),
            )
            new_records = list(records)
            new_records[index] = updated
            self._employees.save_all(new_records)

        logger.info("Updated employee %s", employee_id)
        return updated

    def delete(self, employee_id: int) -> bool:
        with self._lock:
            records = self._employees.load_all()
            index = self._index_of(records, employee_id)
            if index is None:
                return False
            self._employees.save_all(records[:index] + records[index + 1:])

        logger.info("Deleted employee %s", employee_id)
        return True

    def _validate(self, name: Any, department: Any, basic_salary: Any) -> None:
        result = validate_employee_input(name, department, basic_salary)
        if not result.valid:
            raise ValidationError("; ".join(result.errors), errors=result.errors)

    @staticmethod
    def _index_of(records: list[EmployeeRecord], employee_id: int) -> Optional[int]:
        for i, record in enumerate(records):
            if record.id == employee_id:
                return i
        return None

    def _resolve_profile_image(self, form: EmployeeForm) -> str:
        if form.profile_image:
            return form.profile_image

        avatar = None
        try:
            avatar = int(form.selected_avatar) if form.selected_avatar else None
        except (TypeError, ValueError):
            avatar = None
        if avatar is None or not 1 <= avatar <= AVATAR_COUNT:
            avatar = self._rng.randint(1, AVATAR_COUNT)
        return AVATAR_URL_TEMPLATE.format(n=avatar)
