from __future__ import annotations

from enum import Enum


class StaffKind(str, Enum):
    """Closed set of staff variants."""

    DOCTOR = "doctor"
    NURSE = "nurse"
    ADMIN = "admin"


class DutyStatus(str, Enum):
    """Status strings delivered to duty-change subscribers."""

    ON_DUTY = "On Duty"
    OFF_DUTY = "Off Duty"

    @classmethod
    def from_flag(cls, on_duty: bool) -> "DutyStatus":
        return cls.ON_DUTY if on_duty else cls.OFF_DUTY
