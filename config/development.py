import os

from .demo_staff import DEMO_STAFF

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SEED_DEMO_STAFF = bool(int(os.getenv("SEED_DEMO_STAFF", "1")))
