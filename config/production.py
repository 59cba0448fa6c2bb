import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

LOGS_API = {
    "base_url": os.getenv("LOGS_API_URL", "https://api.example.com/api/v1"),
    "token": os.getenv("LOGS_API_TOKEN", ""),
    "timeout": float(os.getenv("LOGS_API_TIMEOUT", "20")),
}

TIMEZONE = os.getenv("TIMEZONE", "Europe/London")

REFRESH_SECONDS = int(os.getenv("REFRESH_SECONDS", "1"))
PAGE_LIMIT = int(os.getenv("PAGE_LIMIT", "200"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
