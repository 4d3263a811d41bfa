from __future__ import annotations

from ..core.constants import DOCTOR_EXPERIENCE_BONUS, DOCTOR_SPECIALTY_ALLOWANCE
from ..core.enums import DutyStatus, StaffKind
from .base import StaffMember
from .notifier import StatusChangeHandler, StatusChangeNotifier


class Doctor(StaffMember):
    """Base salary + experience bonus + specialty allowance."""

    kind = StaffKind.DOCTOR

    def __init__(self, name: str, experience: int, base_salary: float, specialty: str):
        super().__init__(name, experience, base_salary)
        self._specialty = specialty
        self._status_changed = StatusChangeNotifier()

    @property
    def specialty(self) -> str:
        return self._specialty

    def calculate_salary(self) -> float:
        return self._base_salary + self.years_of_experience * DOCTOR_EXPERIENCE_BONUS + DOCTOR_SPECIALTY_ALLOWANCE

    def get_department(self) -> str:
        return f"Medical ({self._specialty})"

    def subscribe(self, handler: StatusChangeHandler) -> None:
        self._status_changed.subscribe(handler)

    def unsubscribe(self, handler: StatusChangeHandler) -> None:
        self._status_changed.unsubscribe(handler)

    def set_on_duty_status(self, on_duty: bool) -> str:
        status = DutyStatus.from_flag(on_duty).value
        self._status_changed.notify(self.name, status)
        return status

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["specialty"] = self._specialty
        return data
