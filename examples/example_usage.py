"""Console walkthrough of the registry (no Flask).

Builds three staff members, prints the salary report, shows a summary,
rejects an invalid rename and toggles a doctor's duty status.
"""

from src.hospital_registry.hospital_registry.common.logging_utils import configure_logging
from src.hospital_registry.hospital_registry.core.exceptions import ValidationError
from src.hospital_registry.hospital_registry.registry.service import HospitalRegistry
from src.hospital_registry.hospital_registry.staff.admin_staff import AdminStaff
from src.hospital_registry.hospital_registry.staff.doctor import Doctor
from src.hospital_registry.hospital_registry.staff.notifier import log_status_change
from src.hospital_registry.hospital_registry.staff.nurse import Nurse


def main():
    configure_logging("INFO")
    registry = HospitalRegistry()

    print("\n[1] Creating staff:")
    dr_ahmad = Doctor("Dr. Ahmad Hassan", 12, 15000, "Cardiology")
    nurse_layla = Nurse("Layla Omar", 5, 5000)
    admin_fadi = AdminStaff("Fadi Nasser", 8, 7000)

    dr_ahmad.subscribe(log_status_change)

    registry.add_staff(dr_ahmad)
    registry.add_staff(nurse_layla)
    registry.add_staff(admin_fadi)
    print(f"  -> Total staff: {registry.total_staff_count}")

    print("\n[2] Salary report:")
    for line in registry.calculate_all_salaries():
        print(line)

    print("\n[3] Summary and validation:")
    print(f"  -> {dr_ahmad.get_summary()}")
    try:
        print("  -> Trying an empty name...")
        dr_ahmad.name = " "
    except ValidationError as e:
        print(f"  [rejected] {e}")

    print("\n[4] Duty status notifications:")
    dr_ahmad.set_on_duty_status(True)
    dr_ahmad.set_on_duty_status(False)


if __name__ == "__main__":
    main()
