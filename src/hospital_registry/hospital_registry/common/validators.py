from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def is_valid_name(name: Optional[str]) -> bool:
    return bool(name and name.strip())


def is_non_negative(value: int) -> bool:
    return value >= 0


def require_valid_name(value: Optional[str], field_name: str = "Staff name") -> str:
    if not is_valid_name(value):
        raise ValidationError(f"{field_name} cannot be empty")
    return value


def require_non_negative(value: int, field_name: str) -> int:
    if not is_non_negative(value):
        raise ValidationError(f"{field_name} must be non-negative")
    return value
