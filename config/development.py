import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

LOGS_API = {
    "base_url": os.getenv("LOGS_API_URL", "http://localhost:5000/api/v1"),
    "token": os.getenv("LOGS_API_TOKEN", ""),
    "timeout": float(os.getenv("LOGS_API_TIMEOUT", "20")),
}

# Civil timezone used for every clock calculation and rendered time
TIMEZONE = os.getenv("TIMEZONE", "Europe/London")

# Live session display re-polls at this interval (seconds)
REFRESH_SECONDS = int(os.getenv("REFRESH_SECONDS", "1"))
PAGE_LIMIT = int(os.getenv("PAGE_LIMIT", "200"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
