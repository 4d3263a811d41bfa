from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import StaffKind
from ..core.exceptions import ValidationError
from .admin_staff import AdminStaff
from .base import StaffMember
from .doctor import Doctor
from .nurse import Nurse


@dataclass
class StaffFactory:
    """Factory Pattern: build the staff variant named by ``kind``."""

    def create(
        self,
        kind: Union[StaffKind, str],
        *,
        name: str,
        experience: int,
        base_salary: float,
        specialty: Optional[str] = None,
    ) -> StaffMember:
        try:
            kind = StaffKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown staff kind: {kind}") from None

        if kind == StaffKind.DOCTOR:
            if not specialty:
                raise ValidationError("Doctor requires a specialty")
            return Doctor(name, experience, base_salary, specialty)
        if kind == StaffKind.NURSE:
            return Nurse(name, experience, base_salary)
        return AdminStaff(name, experience, base_salary)

    def create_many(self, records: list[dict]) -> list[StaffMember]:
        return [self.create(**record) for record in records]
