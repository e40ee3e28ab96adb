"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Runtime settings can be overridden via environment variables.
"""

import os

# Password generation
DEFAULT_PASSWORD_LENGTH = 16
# Bounds enforced by the terminal and API front ends; the generator itself
# accepts any length >= 1
MIN_PASSWORD_LENGTH = 4
MAX_PASSWORD_LENGTH = 128

# Width of each value drawn from the secure random source
RANDOM_BITS = 32

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
# Leave unset to log to stderr
LOG_FILE = os.environ.get("LOG_FILE") or None
LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 5 * 1024 * 1024))  # 5MB default
LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 3))

# API
RATE_LIMIT = os.environ.get("RATE_LIMIT", "100/minute")

# Comma-separated list of browser origins allowed to call the API
_cors_origins_env = os.environ.get(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
)
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

# Longest password accepted by the /check endpoint; bounds request size
MAX_CHECK_PASSWORD_LENGTH = int(os.environ.get("MAX_CHECK_PASSWORD_LENGTH", 1024))
