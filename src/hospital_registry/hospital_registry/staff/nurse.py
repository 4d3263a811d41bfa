from __future__ import annotations

from ..core.constants import NURSE_EXPERIENCE_BONUS
from ..core.enums import StaffKind
from .base import StaffMember


class Nurse(StaffMember):
    """Base salary + experience bonus only."""

    kind = StaffKind.NURSE

    def calculate_salary(self) -> float:
        return self._base_salary + self.years_of_experience * NURSE_EXPERIENCE_BONUS

    def get_department(self) -> str:
        return "Nursing"
