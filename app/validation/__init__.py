"""Validation module for the generation service.

Validation happens in two layers:
- Pydantic models parse request bodies (types and aliases)
- RequestValidator enforces the configured generation limits
"""

from app.validation.validator import RequestValidator

__all__ = [
    "RequestValidator",
]
