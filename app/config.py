"""Runtime configuration for datagen.

Values come from environment variables (see ``app.config_docs`` for the full
reference) and fall back to the defaults below. Generation limits are fixed
in code and published through ``GET /config``.
"""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from app.exceptions import ConfigurationError

DEFAULT_SESSION_TTL_SECONDS = 10 * 60
DEFAULT_MIRROR_TTL_SECONDS = 60 * 60
DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS = 60
DEFAULT_WEB_PORT = 3000


@dataclass(frozen=True)
class FieldLimit:
    """Inclusive bounds and default for one request parameter."""

    min: int
    max: int
    default: Optional[int] = None

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class GenerationLimits:
    num_fields: FieldLimit = FieldLimit(1, 300, 5)
    num_objects: FieldLimit = FieldLimit(0, 10, 1)
    num_nesting: FieldLimit = FieldLimit(0, 5, 1)
    num_records: FieldLimit = FieldLimit(1, 10000, 10)
    nested_fields: FieldLimit = FieldLimit(0, 50, 3)
    total_records: FieldLimit = FieldLimit(1, 1_000_000)
    records_per_page: FieldLimit = FieldLimit(10, 1000, 100)
    uniform_field_length_default: bool = False

    def to_public_dict(self) -> Dict[str, Any]:
        """Camel-cased view served by ``GET /config``."""
        data = asdict(self)
        return {
            "numFields": data["num_fields"],
            "numObjects": data["num_objects"],
            "numNesting": data["num_nesting"],
            "numRecords": data["num_records"],
            "nestedFields": data["nested_fields"],
            "totalRecords": data["total_records"],
            "recordsPerPage": data["records_per_page"],
            "uniformFieldLength": {"default": data["uniform_field_length_default"]},
        }


LIMITS = GenerationLimits()


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Environment-backed settings."""

    @classmethod
    def get_data_dir(cls) -> Path:
        raw = os.environ.get("DATAGEN_DATA_DIR")
        if raw:
            return Path(raw)
        return Path(__file__).parent.parent / "data"

    @classmethod
    def get_mirror_dir(cls) -> Path:
        return cls.get_data_dir() / "pages"

    @classmethod
    def mirror_enabled(cls) -> bool:
        return _env_flag("DATAGEN_MIRROR_PAGES")

    @classmethod
    def get_session_ttl_seconds(cls) -> int:
        return _env_int("DATAGEN_SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS)

    @classmethod
    def get_mirror_ttl_seconds(cls) -> int:
        return _env_int("DATAGEN_MIRROR_TTL_SECONDS", DEFAULT_MIRROR_TTL_SECONDS)

    @classmethod
    def get_housekeeping_interval_seconds(cls) -> int:
        return _env_int(
            "DATAGEN_HOUSEKEEPING_INTERVAL_SECONDS", DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS
        )

    @classmethod
    def get_web_port(cls) -> int:
        return _env_int("DATAGEN_WEB_PORT", DEFAULT_WEB_PORT)

    @classmethod
    def get_log_level(cls) -> str:
        return os.environ.get("DATAGEN_LOG_LEVEL", "INFO").upper()


def get_default_mirror_dir() -> str:
    return str(Config.get_mirror_dir())


__all__ = [
    "Config",
    "FieldLimit",
    "GenerationLimits",
    "LIMITS",
    "DEFAULT_SESSION_TTL_SECONDS",
    "DEFAULT_MIRROR_TTL_SECONDS",
    "DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS",
    "DEFAULT_WEB_PORT",
    "get_default_mirror_dir",
]
