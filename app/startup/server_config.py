"""Startup configuration resolution for the datagen web server."""

from typing import Optional

from app.config_docs import get_config_summary
from app.logger import Logger
from app.storage import FileStorage, PageStorageBase, get_storage


def validate_environment(logger: Logger) -> dict:
    """
    Read every environment-backed setting once so bad values fail at startup.

    Returns:
        Configuration summary (see app.config_docs.get_config_summary)

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    summary = get_config_summary()
    logger.info("Configuration resolved", **summary)
    return summary


def resolve_page_storage(
    mirror_dir_arg: Optional[str],
    disable_mirror: bool,
    logger: Logger,
) -> Optional[PageStorageBase]:
    """
    Decide whether generated pages are mirrored, and where.

    Priority:
    1. --no-mirror disables mirroring
    2. --mirror-dir enables it in the given directory
    3. DATAGEN_MIRROR_PAGES enables it in the configured data directory

    A mirror that cannot be initialized is logged and skipped; the service
    runs without it.
    """
    if disable_mirror:
        logger.info("Page mirror disabled by flag")
        return None
    try:
        if mirror_dir_arg:
            return FileStorage(mirror_dir_arg, logger=logger)
        storage = get_storage()
    except RuntimeError as e:
        logger.warning("Page mirror unavailable, continuing without it", error=str(e))
        return None
    if storage is None:
        logger.info("Page mirror not configured")
    return storage
