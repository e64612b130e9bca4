import os

from .config import REPO_ROOT

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("TEST_DATA_FILE", str(REPO_ROOT / "employees.test.json"))

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
