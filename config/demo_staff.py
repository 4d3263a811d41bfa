# Staff seeded into the registry when SEED_DEMO_STAFF is enabled.
DEMO_STAFF = [
    {"kind": "doctor", "name": "Dr. Ahmad Hassan", "experience": 12, "base_salary": 15000, "specialty": "Cardiology"},
    {"kind": "nurse", "name": "Layla Omar", "experience": 5, "base_salary": 5000},
    {"kind": "admin", "name": "Fadi Nasser", "experience": 8, "base_salary": 7000},
]
