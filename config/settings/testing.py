from .base import *  # noqa: F403

DEBUG = False

# Use a fast password hasher for testing
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Use in-memory SQLite for speed
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

LEAGUE_DEFAULT_TIER = "moderate"

# Disable logging during tests to keep output clean(er)
LOGGING = {
    "version": 1,
    "disable_existing_loggers": True,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
        },
    },
    "loggers": {
        "league": {
            "handlers": ["console"],
            "level": "CRITICAL",
        },
    },
}

# Uncached loggers so structlog.testing.capture_logs works in any test order
from config.logging import configure_structlog  # noqa: E402

configure_structlog(debug=False, cache_loggers=False)
