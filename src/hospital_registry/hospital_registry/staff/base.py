from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import ClassVar

from ..common.validators import require_non_negative, require_valid_name
from ..core.enums import StaffKind


class StaffMember(ABC):
    """Abstract hospital employee.

    Each variant supplies its own salary formula and department label;
    ``get_summary`` stays on the base and picks the department up through the
    overridden ``get_department``.
    """

    kind: ClassVar[StaffKind]

    def __init__(self, name: str, experience: int, base_salary: float):
        self._staff_id = uuid.uuid4()
        self.name = name
        self._years_of_experience = require_non_negative(experience, "Years of experience")
        self._base_salary = base_salary

    @property
    def staff_id(self) -> uuid.UUID:
        return self._staff_id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_valid_name(value, "Staff name")

    @property
    def years_of_experience(self) -> int:
        return self._years_of_experience

    @property
    def base_salary(self) -> float:
        return self._base_salary

    @abstractmethod
    def calculate_salary(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def get_department(self) -> str:
        raise NotImplementedError

    def get_summary(self) -> str:
        return (
            f"ID: {self._staff_id}, Name: {self._name}, "
            f"Exp: {self._years_of_experience} years, Dept: {self.get_department()}"
        )

    def to_dict(self) -> dict:
        return {
            "staff_id": str(self._staff_id),
            "kind": self.kind.value,
            "name": self._name,
            "years_of_experience": self._years_of_experience,
            "base_salary": self._base_salary,
            "department": self.get_department(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, experience={self._years_of_experience})"
