from .config import Config

SECRET_KEY = Config.SECRET_KEY or "please-set-SECRET_KEY"

DATA_FILE = Config.DATA_FILE

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
