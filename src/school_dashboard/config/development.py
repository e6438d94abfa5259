import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Load the demo students/teachers/notices on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
MAX_DOCUMENT_BYTES = int(os.getenv("MAX_DOCUMENT_BYTES", str(10 * 1024 * 1024)))
