"""Housekeeper: periodic cleanup for the datagen web server.

Runs in a background thread inside the server process. Each cycle removes
expired pagination sessions from the in-memory store and purges mirrored
pages older than the mirror TTL. Sessions are also expired lazily on access
and swept after every create; this loop bounds memory when traffic stops.

Environment Variables:
    DATAGEN_HOUSEKEEPING_INTERVAL_SECONDS  Cycle interval in seconds (default: 60)
    DATAGEN_MIRROR_TTL_SECONDS             Mirrored page lifetime  (default: 3600)
"""

import threading
from typing import Dict, Optional

from app.config import Config
from app.logger import Logger, session_logger
from app.sessions.storage import SessionStore
from app.storage.base import PageStorageBase


class Housekeeper:
    """Background sweeper for sessions and mirrored pages."""

    def __init__(
        self,
        session_store: SessionStore,
        page_storage: Optional[PageStorageBase] = None,
        interval_seconds: Optional[int] = None,
        mirror_ttl_seconds: Optional[int] = None,
        logger: Optional[Logger] = None,
    ):
        self.session_store = session_store
        self.page_storage = page_storage
        self.interval_seconds = interval_seconds or Config.get_housekeeping_interval_seconds()
        self.mirror_ttl_seconds = mirror_ttl_seconds or Config.get_mirror_ttl_seconds()
        self.logger: Logger = logger or session_logger
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def run_cycle(self) -> Dict[str, int]:
        """Run one sweep; failures of one step do not skip the other."""
        result = {"sessions_removed": 0, "pages_purged": 0}
        try:
            result["sessions_removed"] = self.session_store.sweep_expired()
        except Exception as e:
            self.logger.error("housekeeper.session_sweep_failed", error=str(e), cause=type(e).__name__)

        if self.page_storage is not None:
            try:
                result["pages_purged"] = self.page_storage.purge(max_age_seconds=self.mirror_ttl_seconds)
            except Exception as e:
                self.logger.error("housekeeper.page_purge_failed", error=str(e), cause=type(e).__name__)

        self.logger.info(
            "housekeeper.cycle_ok",
            sessions_removed=result["sessions_removed"],
            pages_purged=result["pages_purged"],
            active_sessions=len(self.session_store),
        )
        return result

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="datagen-housekeeper", daemon=True)
        self._thread.start()
        self.logger.info("Starting datagen housekeeper", interval_seconds=self.interval_seconds)

    def stop(self, timeout: float = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        self.logger.info("Housekeeper stopped")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _loop(self) -> None:
        while not self._stop.wait(self.interval_seconds):
            self.run_cycle()
