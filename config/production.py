import os

from .demo_staff import DEMO_STAFF

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_STAFF = bool(int(os.getenv("SEED_DEMO_STAFF", "0")))
