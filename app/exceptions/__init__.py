"""Custom exceptions for the data generation and pagination pipeline.

All exceptions carry a code and a message that is safe to return to API
clients verbatim.
"""

from app.exceptions.base import (
    DatagenError,
    ValidationError,
    ResourceNotFoundError,
    ConfigurationError,
)
from app.exceptions.session import (
    SessionError,
    SessionNotFoundError,
    PageOutOfRangeError,
)

__all__ = [
    "DatagenError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "SessionError",
    "SessionNotFoundError",
    "PageOutOfRangeError",
]
