"""
Startup validation checks for production environment.

Validates that all required configuration is present before the application starts,
failing fast with a clear message instead of a runtime error on the first request.
"""

import os

from django.core.exceptions import ImproperlyConfigured

REQUIRED_PRODUCTION_VARS = [
    "SECRET_KEY",
    "ALLOWED_HOSTS",
    "DB_NAME",
    "DB_USER",
    "DB_PASSWORD",
]

VALID_TIERS = ("cautious", "moderate", "aggressive")


def validate_production_config() -> None:
    """
    Validate all required environment variables for production deployment.

    Raises:
        ImproperlyConfigured: If a required variable is missing, ALLOWED_HOSTS
            is empty, or LEAGUE_DEFAULT_TIER names an unknown tier.
    """
    missing = [var for var in REQUIRED_PRODUCTION_VARS if not os.getenv(var)]

    if missing:
        raise ImproperlyConfigured(
            f"Missing required environment variables for production: {', '.join(missing)}\n"
            f"Please set these in your environment or .env file.\n"
            f"See .env.example for reference."
        )

    allowed_hosts = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h.strip()]
    if not allowed_hosts:
        raise ImproperlyConfigured(
            "ALLOWED_HOSTS environment variable must contain at least one hostname"
        )

    tier = os.getenv("LEAGUE_DEFAULT_TIER", "moderate").strip().lower()
    if tier not in VALID_TIERS:
        raise ImproperlyConfigured(
            f"LEAGUE_DEFAULT_TIER must be one of {', '.join(VALID_TIERS)}, got {tier!r}"
        )
