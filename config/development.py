import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY or "dev-secret-key"

DATA_FILE = Config.DATA_FILE

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
