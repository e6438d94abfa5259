import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

DEFAULT_LANGUAGE = "en"
LOG_LEVEL = "WARNING"
MAX_DOCUMENT_BYTES = 10 * 1024 * 1024
