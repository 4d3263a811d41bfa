import os

from .demo_staff import DEMO_STAFF

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

SEED_DEMO_STAFF = bool(int(os.getenv("SEED_DEMO_STAFF", "1")))
