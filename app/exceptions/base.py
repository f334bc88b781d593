"""Base exception classes for the datagen service.

Every error carries a machine-readable ``code``, a human-readable ``message``
and an optional ``details`` dict. The web server turns these into
``{"error": message, "code": code, ...details}`` responses; ``status_code``
selects the HTTP status.
"""

from typing import Any, Dict, Optional


class DatagenError(Exception):
    """Base class for all datagen errors."""

    default_code = "DATAGEN_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str = "",
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details: Dict[str, Any] = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for an error response body."""
        payload: Dict[str, Any] = {"error": self.message, "code": self.code}
        payload.update(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ValidationError(DatagenError):
    """A request parameter is missing, malformed, or outside configured bounds."""

    default_code = "VALIDATION_ERROR"
    status_code = 400


class ResourceNotFoundError(DatagenError):
    """A referenced resource does not exist."""

    default_code = "NOT_FOUND"
    status_code = 404


class ConfigurationError(DatagenError):
    """Invalid service configuration (environment or CLI)."""

    default_code = "CONFIGURATION_ERROR"
    status_code = 500


__all__ = [
    "DatagenError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
]
