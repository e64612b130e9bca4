from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Gender values offered by the employee form."""

    MALE = "Male"
    FEMALE = "Female"
