from __future__ import annotations

from ..core.constants import ADMIN_ALLOWANCE
from ..core.enums import StaffKind
from .base import StaffMember


class AdminStaff(StaffMember):
    """Fixed salary with an administrative allowance."""

    kind = StaffKind.ADMIN

    def calculate_salary(self) -> float:
        return self._base_salary + ADMIN_ALLOWANCE

    def get_department(self) -> str:
        return "Administration"
