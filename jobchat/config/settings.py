"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    DEBUG = _flag("DEBUG", "false")

    # Auth (tokens are issued by the marketplace's identity service)
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "marketplace-auth")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "jobchat")

    # Storage: "prisma" (PostgreSQL via Prisma, DATABASE_URL) or "memory"
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "prisma").lower()
    # Prisma interactive transaction timeout for find-or-create + append
    ANCHOR_LOCK_TIMEOUT_MS = int(os.getenv("ANCHOR_LOCK_TIMEOUT_MS", "5000"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s",
    )

    # HTTP
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Rate limiting
    RATELIMIT_ENABLED = _flag("RATELIMIT_ENABLED", "true")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    MESSAGE_RATE_LIMIT = os.getenv("MESSAGE_RATE_LIMIT", "30/minute;1000/day")

    # Notifications
    NOTIFICATION_LIST_LIMIT = int(os.getenv("NOTIFICATION_LIST_LIMIT", "50"))
