import os

SECRET_KEY = "test-secret"

LOGS_API = {
    "base_url": os.getenv("LOGS_API_URL", "http://logs.test/api/v1"),
    "token": "test-token",
    "timeout": 5,
}

TIMEZONE = "Europe/London"

REFRESH_SECONDS = 1
PAGE_LIMIT = 200

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
