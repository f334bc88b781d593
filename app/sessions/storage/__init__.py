"""In-memory store for pagination sessions."""

from __future__ import annotations

import random
import string
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Optional

from app.config import DEFAULT_SESSION_TTL_SECONDS
from app.generation.normalizer import LengthSchema
from app.logger import Logger
from app.validation.models import GenerationConfig

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 9


def generate_session_id(now: Optional[float] = None) -> str:
    """``session_{epoch_millis}_{9 random base36 chars}``."""
    millis = int((time.time() if now is None else now) * 1000)
    suffix = "".join(random.SystemRandom().choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"session_{millis}_{suffix}"


def short_id(session_id: str) -> str:
    """Last eight characters, enough to tell sessions apart in logs."""
    return session_id[-8:]


@dataclass
class Session:
    """A pagination session.

    ``config``, ``length_schema`` and ``anchor`` never change after creation;
    only ``expires_at`` slides forward on access.
    """

    session_id: str
    config: GenerationConfig
    anchor: datetime
    created_at: float
    expires_at: float
    length_schema: Optional[LengthSchema] = field(default=None)

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


class SessionStore:
    """Thread-safe map of session id to Session with a sliding TTL.

    A single lock guards the map. Lookups of unknown or expired sessions
    return ``None``; the caller decides how to report that.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        logger: Optional[Logger] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.logger = logger
        self._clock = clock
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(
        self,
        config: GenerationConfig,
        length_schema: Optional[LengthSchema],
        anchor: datetime,
    ) -> str:
        """Store a new session and return its id; sweeps expired sessions afterwards."""
        now = self._clock()
        with self._lock:
            session_id = generate_session_id(now)
            while session_id in self._sessions:
                session_id = generate_session_id(now)
            self._sessions[session_id] = Session(
                session_id=session_id,
                config=config,
                anchor=anchor,
                created_at=now,
                expires_at=now + self.ttl_seconds,
                length_schema=length_schema,
            )
        if self.logger:
            self.logger.info(
                "Session stored",
                session=short_id(session_id),
                ttl_seconds=self.ttl_seconds,
                uniform_length=length_schema is not None,
            )
        self.sweep_expired()
        return session_id

    def get(self, session_id: str) -> Optional[Session]:
        """Return the session and slide its expiry, or ``None`` if absent or expired."""
        now = self._clock()
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.is_expired(now):
                del self._sessions[session_id]
                expired = True
            else:
                session.expires_at = now + self.ttl_seconds
                expired = False
        if self.logger:
            if expired:
                self.logger.debug("Session expired and removed", session=short_id(session_id))
            else:
                self.logger.debug("Session TTL refreshed", session=short_id(session_id))
        return None if expired else session

    def delete(self, session_id: str) -> bool:
        """Evict a session; True if it existed."""
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed and self.logger:
            self.logger.info("Session deleted", session=short_id(session_id))
        return removed

    def sweep_expired(self) -> int:
        """Remove every session whose expiry has passed; returns the count."""
        now = self._clock()
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if s.expires_at < now]
            for session_id in expired:
                del self._sessions[session_id]
        if self.logger:
            for session_id in expired:
                self.logger.info("Expired session removed", session=short_id(session_id))
        return len(expired)

    def list_sessions(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions


__all__ = ["Session", "SessionStore", "generate_session_id", "short_id"]
