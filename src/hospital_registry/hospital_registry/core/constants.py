"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DOCTOR_EXPERIENCE_BONUS = 500
DOCTOR_SPECIALTY_ALLOWANCE = 2000
NURSE_EXPERIENCE_BONUS = 300
ADMIN_ALLOWANCE = 1000

REPORT_HEADER = "--- Monthly Salary Report ---"
REPORT_LINE = "{name} ({department}): salary = {salary:,.2f}"
REPORT_FOOTER = "--- Total Monthly Cost: {total:,.2f} ---"
