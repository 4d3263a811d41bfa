import pytest

from src.hospital_registry.hospital_registry.core.enums import StaffKind
from src.hospital_registry.hospital_registry.core.exceptions import ValidationError
from src.hospital_registry.hospital_registry.staff.admin_staff import AdminStaff
from src.hospital_registry.hospital_registry.staff.doctor import Doctor
from src.hospital_registry.hospital_registry.staff.factory import StaffFactory
from src.hospital_registry.hospital_registry.staff.nurse import Nurse


def test_factory_builds_each_kind():
    factory = StaffFactory()

    doctor = factory.create(StaffKind.DOCTOR, name="Ahmad", experience=12, base_salary=15000, specialty="Cardiology")
    nurse = factory.create("nurse", name="Layla", experience=5, base_salary=5000)
    admin = factory.create("admin", name="Fadi", experience=8, base_salary=7000)

    assert isinstance(doctor, Doctor) and doctor.specialty == "Cardiology"
    assert isinstance(nurse, Nurse)
    assert isinstance(admin, AdminStaff)


def test_factory_rejects_unknown_kind():
    with pytest.raises(ValidationError, match="Unknown staff kind"):
        StaffFactory().create("surgeon", name="X", experience=1, base_salary=1)


def test_factory_requires_doctor_specialty():
    with pytest.raises(ValidationError, match="specialty"):
        StaffFactory().create("doctor", name="X", experience=1, base_salary=1)


def test_create_many_keeps_order():
    members = StaffFactory().create_many(
        [
            {"kind": "admin", "name": "Fadi", "experience": 8, "base_salary": 7000},
            {"kind": "nurse", "name": "Layla", "experience": 5, "base_salary": 5000},
        ]
    )
    assert [m.name for m in members] == ["Fadi", "Layla"]
