"""Page mirror storage module

Provides the abstract base class and the file-backed implementation used to
mirror generated pages. Mirroring is off unless enabled by configuration.
"""

from typing import Optional

from app.config import Config
from app.storage.base import PageStorageBase
from app.storage.file_storage import FileStorage

# Global storage instance
_storage: Optional[PageStorageBase] = None


def get_storage(storage_dir: Optional[str] = None) -> Optional[PageStorageBase]:
    """
    Get or create the global page mirror

    Args:
        storage_dir: Directory for file storage (only used on first call).
                    If None, uses configured default from app.config

    Returns:
        FileStorage when mirroring is enabled (DATAGEN_MIRROR_PAGES) or a
        directory is given explicitly, otherwise None
    """
    global _storage
    if _storage is None and (storage_dir is not None or Config.mirror_enabled()):
        _storage = FileStorage(storage_dir)
    return _storage


def set_storage(storage: Optional[PageStorageBase]) -> None:
    """
    Set a custom storage implementation or reset to None

    Args:
        storage: Custom storage implementation, or None to reset
    """
    global _storage
    _storage = storage


def reset_storage() -> None:
    """Reset the global storage instance (useful for testing)"""
    global _storage
    _storage = None


__all__ = [
    "PageStorageBase",
    "FileStorage",
    "get_storage",
    "set_storage",
    "reset_storage",
]
