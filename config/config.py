import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


class Config:
    """Values shared by every environment, read from the process environment."""

    SECRET_KEY = os.environ.get("SECRET_KEY")

    # Backing JSON document for the employee store
    DATA_FILE = os.environ.get("DATA_FILE", str(REPO_ROOT / "employees.json"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
