import pytest

from src.hospital_registry.hospital_registry.common.validators import (
    is_non_negative,
    is_valid_name,
    require_non_negative,
    require_valid_name,
)
from src.hospital_registry.hospital_registry.core.exceptions import ValidationError


@pytest.mark.parametrize("name", ["Ahmad", " Layla ", "x"])
def test_valid_names(name):
    assert is_valid_name(name)


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_empty_or_whitespace_names_are_invalid(name):
    assert not is_valid_name(name)


def test_non_negative_boundaries():
    assert is_non_negative(0)
    assert is_non_negative(7)
    assert not is_non_negative(-1)


def test_require_forms_raise_validation_error():
    with pytest.raises(ValidationError, match="Staff name cannot be empty"):
        require_valid_name("  ", "Staff name")
    with pytest.raises(ValidationError, match="Years of experience must be non-negative"):
        require_non_negative(-3, "Years of experience")

    assert require_valid_name(" Fadi", "Staff name") == " Fadi"
    assert require_non_negative(0, "Years of experience") == 0
