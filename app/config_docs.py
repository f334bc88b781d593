"""Centralized configuration documentation and defaults for the datagen service.

This module provides a comprehensive overview of all configuration options
and their environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Data & Storage
# --------------
# DATAGEN_DATA_DIR: Base directory for persistent data (default: ./data)
#   Used for: mirrored pages
#
# DATAGEN_MIRROR_PAGES: Mirror every generated page to the file-backed page
#   store (default: off). Values: 1/true/yes/on
# DATAGEN_MIRROR_TTL_SECONDS: Age after which mirrored pages are purged
#   (default: 3600)
#
# Sessions
# --------
# DATAGEN_SESSION_TTL_SECONDS: Sliding TTL for pagination sessions
#   (default: 600)
# DATAGEN_HOUSEKEEPING_INTERVAL_SECONDS: Interval between background sweeps of
#   expired sessions and mirrored pages (default: 60)
#
# Application
# -----------
# DATAGEN_WEB_PORT: Web server port (default: 3000)
# DATAGEN_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

from app.config import (  # noqa: E402
    DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS,
    DEFAULT_MIRROR_TTL_SECONDS,
    DEFAULT_SESSION_TTL_SECONDS,
    DEFAULT_WEB_PORT,
)

DEFAULT_LOG_LEVEL = "INFO"

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Returns:
        Dictionary with current configuration values
    """
    from app.config import Config

    return {
        "data_dir": str(Config.get_data_dir()),
        "mirror_dir": str(Config.get_mirror_dir()),
        "mirror_pages": Config.mirror_enabled(),
        "mirror_ttl_seconds": Config.get_mirror_ttl_seconds(),
        "session_ttl_seconds": Config.get_session_ttl_seconds(),
        "housekeeping_interval_seconds": Config.get_housekeeping_interval_seconds(),
        "web_port": Config.get_web_port(),
        "log_level": Config.get_log_level(),
    }


__all__ = [
    "DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS",
    "DEFAULT_MIRROR_TTL_SECONDS",
    "DEFAULT_SESSION_TTL_SECONDS",
    "DEFAULT_WEB_PORT",
    "DEFAULT_LOG_LEVEL",
    "get_config_summary",
]
