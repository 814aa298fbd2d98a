"""
Centralized configuration module for application-wide settings.

Every setting is read from an environment variable with a safe default,
resolved once at import time and logged during application startup.
"""

import os
import logging
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'America/Chicago', 'UTC')
            Default: 'UTC'
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


APP_TZ = get_app_timezone()


def log_timezone_config():
    """Log the active timezone configuration."""
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )


# ===========================
# Directory Search Configuration
# ===========================


def get_search_case_sensitive() -> bool:
    """
    Get whether text filters (last name, city) compare case-sensitively.

    Environment Variables:
        SEARCH_CASE_SENSITIVE: "true" to match letter case exactly
            Default: 'false' ("davis" finds "Davis")

    Truthy values: "true", "1", "yes" (case-insensitive)
    """
    return _env_flag("SEARCH_CASE_SENSITIVE", "false")


SEARCH_CASE_SENSITIVE = get_search_case_sensitive()


def get_upcoming_visits_default_days() -> int:
    """
    Get the default look-ahead window (in days) for the upcoming visits page.

    Environment Variables:
        UPCOMING_VISITS_DEFAULT_DAYS: Non-negative integer
            Default: 7
    """
    raw = os.getenv("UPCOMING_VISITS_DEFAULT_DAYS", "7")
    try:
        days = int(raw)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid UPCOMING_VISITS_DEFAULT_DAYS, using 7",
            extra={"context": {"value": raw}},
        )
        return 7
    return max(days, 0)


UPCOMING_VISITS_DEFAULT_DAYS = get_upcoming_visits_default_days()


def log_search_config():
    """Log the active directory search configuration."""
    logger.info(
        "Directory search configuration initialized",
        extra={
            "context": {
                "case_sensitive": SEARCH_CASE_SENSITIVE,
                "upcoming_visits_default_days": UPCOMING_VISITS_DEFAULT_DAYS,
            }
        },
    )


# ===========================
# Startup Configuration
# ===========================


def get_seed_on_startup() -> bool:
    """
    Get whether the clinic reference data is loaded into an empty database
    when the application starts.

    Environment Variables:
        SEED_ON_STARTUP: Default 'true'
    """
    return _env_flag("SEED_ON_STARTUP", "true")


def get_metrics_enabled() -> bool:
    """
    Get whether the Prometheus /metrics endpoint is exposed.

    Environment Variables:
        METRICS_ENABLED: Default 'true'
    """
    return _env_flag("METRICS_ENABLED", "true")


def get_log_to_file() -> bool:
    """
    Get whether logs are also written to rotating files under ./logs.

    Environment Variables:
        LOG_TO_FILE: Default 'false' (stdout only)
    """
    return _env_flag("LOG_TO_FILE", "false")
