"""Startup utilities for the datagen services."""

from .server_config import resolve_page_storage, validate_environment

__all__ = ["resolve_page_storage", "validate_environment"]
