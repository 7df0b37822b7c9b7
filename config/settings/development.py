from .base import *  # noqa: F403

DEBUG = True

# Development: Enable template debugging
TEMPLATES[0]["OPTIONS"]["debug"] = True  # noqa: F405

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "[::1]"]

# Simplify password validation for development
AUTH_PASSWORD_VALIDATORS = []

# Development-specific logging: verbose output with colors
from config.logging import get_logging_config  # noqa: E402

LOGGING = get_logging_config(debug=True)
# Set league logging to DEBUG for development (shows unclassified sectors)
LOGGING["loggers"]["league"]["level"] = "DEBUG"
