"""
Centralized configuration.

All settings come from environment variables (loaded from .env.local and
.env by the entry point) and are read through these accessors so tests can
patch the environment.
"""

import logging
import os

logger = logging.getLogger(__name__)


def is_dev_mode() -> bool:
    """Check if running in development mode (DEV_MODE env)."""
    return os.getenv("DEV_MODE", "").lower() in ("true", "1", "yes")


def get_database_url() -> str | None:
    return os.environ.get("DATABASE_URL")


def is_sql_echo() -> bool:
    return os.environ.get("SQL_ECHO", "").lower() == "true"


def get_api_port() -> int:
    """Get API server port from env or default."""
    return int(os.getenv("API_PORT", "8000"))


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_sentry_dsn() -> str | None:
    return os.environ.get("SENTRY_DSN") or None


def get_default_timezone() -> str:
    """Timezone used when a request does not name the student's zone."""
    return os.getenv("DEFAULT_TIMEZONE", "UTC")


def get_allowed_origins() -> list[str]:
    """
    Get list of allowed CORS origins.

    Includes localhost variants for dev and the configured frontend URL.
    """
    origins = [
        f"http://{host}:{port}"
        for host in ("localhost", "127.0.0.1")
        for port in (3000, 5173)
    ]

    frontend_url = os.environ.get("FRONTEND_URL")
    if frontend_url and frontend_url.rstrip("/") not in origins:
        origins.append(frontend_url.rstrip("/"))

    return origins


# Required environment variables
# Format: (name, description, required_in_dev)
REQUIRED_ENV_VARS = [
    ("DATABASE_URL", "PostgreSQL connection string", True),
    ("SENTRY_DSN", "Sentry error reporting DSN", False),
]


def check_required_env_vars() -> tuple[bool, list[str]]:
    """
    Check that required environment variables are set.

    Returns:
        (all_ok, warnings): Tuple of success flag and list of warning messages
    """
    warnings = []
    errors = []
    in_dev = is_dev_mode()

    for name, description, required_in_dev in REQUIRED_ENV_VARS:
        if os.environ.get(name):
            continue
        if required_in_dev and not in_dev:
            errors.append(f"{name}: Not set ({description})")
        elif required_in_dev or not in_dev:
            warnings.append(f"{name}: Not set ({description})")

    for error in errors:
        logger.error(error)

    return not errors, warnings
