import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
MAX_DOCUMENT_BYTES = int(os.getenv("MAX_DOCUMENT_BYTES", str(10 * 1024 * 1024)))
