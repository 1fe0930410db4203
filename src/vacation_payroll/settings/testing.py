from .base import DB_CONFIG, VACATION_DEFAULTS  # noqa: F401

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
LOG_LEVEL = "DEBUG"
