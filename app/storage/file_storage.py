"""File-based page mirror

Stores each page as ``{storage_dir}/{session_id}/page_{n}.json`` and keeps a
``metadata.json`` index with creation timestamps used by ``purge``.
"""

import json
import re
import shutil
import threading
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from app.config import get_default_mirror_dir
from app.logger import Logger, session_logger
from app.storage.base import PageStorageBase

_SESSION_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


def page_key(session_id: str, page_number: int) -> str:
    return f"{session_id}/{page_number}"


class FileStorage(PageStorageBase):
    """File-based page storage with a JSON metadata index"""

    def __init__(
        self,
        storage_dir: Optional[str] = None,
        logger: Optional[Logger] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize file storage

        Args:
            storage_dir: Directory to store pages. If None, uses configured default from app.config
            logger: Logger instance
            clock: Time source, injectable for tests
        """
        if storage_dir is None:
            storage_dir = get_default_mirror_dir()
        self.storage_dir = Path(storage_dir)
        self.metadata_file = self.storage_dir / "metadata.json"
        self.logger: Logger = logger or session_logger
        self._clock = clock
        self._lock = threading.Lock()
        self.metadata: Dict[str, Dict[str, Any]] = {}

        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            self._load_metadata()
            self.logger.info("Page storage initialized", directory=str(self.storage_dir))
        except OSError as e:
            self.logger.error("Failed to create storage directory", error=str(e))
            raise RuntimeError(f"Failed to create storage directory: {str(e)}")

    def _load_metadata(self) -> None:
        """Load page metadata"""
        if not self.metadata_file.exists():
            self.metadata = {}
            self.logger.debug("Metadata initialized as empty")
            return
        try:
            with open(self.metadata_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error("Failed to load metadata", error=str(e))
            self.metadata = {}
            return
        if isinstance(data, dict):
            self.metadata = data
            self.logger.debug("Metadata loaded", pages_count=len(self.metadata))
        else:
            self.logger.warning(
                "Metadata has unexpected structure, resetting to empty dict",
                type=type(data).__name__,
            )
            self.metadata = {}

    def _save_metadata(self) -> None:
        """Save page metadata to disk"""
        try:
            with open(self.metadata_file, "w", encoding="utf-8") as f:
                json.dump(self.metadata, f, indent=2)
        except OSError as e:
            self.logger.error("Failed to save metadata", error=str(e))
            raise RuntimeError(f"Failed to save metadata: {str(e)}")

    def _page_path(self, session_id: str, page_number: int) -> Path:
        if not _SESSION_ID_RE.match(session_id):
            raise ValueError(f"Invalid session id: {session_id!r}")
        return self.storage_dir / session_id / f"page_{page_number}.json"

    def save_page(self, session_id: str, page_number: int, records: List[Dict[str, Any]]) -> str:
        path = self._page_path(session_id, page_number)
        key = page_key(session_id, page_number)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False)
        except OSError as e:
            self.logger.error("Failed to save page file", page=key, error=str(e))
            raise RuntimeError(f"Failed to save page: {str(e)}")

        with self._lock:
            self.metadata[key] = {
                "session_id": session_id,
                "page_number": page_number,
                "records": len(records),
                "created_at": self._clock(),
            }
            self._save_metadata()
        self.logger.debug("Page mirrored", page=key, records=len(records))
        return key

    def get_page(self, session_id: str, page_number: int) -> Optional[List[Dict[str, Any]]]:
        path = self._page_path(session_id, page_number)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error("Failed to read page file", path=str(path), error=str(e))
            raise RuntimeError(f"Failed to read page: {str(e)}")

    def delete_session(self, session_id: str) -> int:
        session_dir = self.storage_dir / session_id
        with self._lock:
            keys = [k for k, v in self.metadata.items() if v.get("session_id") == session_id]
            for key in keys:
                del self.metadata[key]
            if keys:
                self._save_metadata()
        if session_dir.is_dir():
            shutil.rmtree(session_dir, ignore_errors=True)
        self.logger.info("Session pages deleted", session_id=session_id, pages=len(keys))
        return len(keys)

    def list_pages(self, session_id: Optional[str] = None) -> List[str]:
        with self._lock:
            keys = [
                k
                for k, v in self.metadata.items()
                if session_id is None or v.get("session_id") == session_id
            ]
        return sorted(keys)

    def purge(self, max_age_seconds: int = 0) -> int:
        self.logger.info("Starting purge", max_age_seconds=max_age_seconds)
        cutoff = self._clock() - max_age_seconds
        deleted_count = 0
        try:
            with self._lock:
                for key, meta in list(self.metadata.items()):
                    created_at = meta.get("created_at")
                    if max_age_seconds > 0 and isinstance(created_at, (int, float)) and created_at >= cutoff:
                        continue
                    path = self.storage_dir / meta.get("session_id", "") / f"page_{meta.get('page_number')}.json"
                    path.unlink(missing_ok=True)
                    del self.metadata[key]
                    deleted_count += 1
                    self.logger.debug("Purged page", page=key)
                if deleted_count:
                    self._save_metadata()
            self._remove_empty_dirs()
        except OSError as e:
            self.logger.error("Purge operation failed", error=str(e))
            raise RuntimeError(f"Failed to purge pages: {str(e)}")

        self.logger.info(
            "Purge completed", deleted_count=deleted_count, max_age_seconds=max_age_seconds
        )
        return deleted_count

    def _remove_empty_dirs(self) -> None:
        for child in self.storage_dir.iterdir():
            if child.is_dir() and not any(child.iterdir()):
                child.rmdir()
