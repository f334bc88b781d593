"""Session-related exceptions."""

from typing import Optional, Dict, Any
from app.exceptions.base import ValidationError, ResourceNotFoundError


class SessionError(ValidationError):
    """Base exception for session-related errors."""

    pass


class SessionNotFoundError(ResourceNotFoundError):
    """Raised when a session id is unknown or its TTL has lapsed.

    The message is the same in both cases so callers learn nothing about
    sessions that used to exist.
    """

    def __init__(self, session_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="SESSION_NOT_FOUND",
            message="Session not found or expired. Please start a new pagination session.",
            details=details or {},
        )
        self.session_id = session_id


class PageOutOfRangeError(SessionError):
    """Raised when a page number falls outside ``[1, total_pages]``."""

    def __init__(self, page_number: int, total_pages: int):
        super().__init__(
            code="PAGE_OUT_OF_RANGE",
            message=f"Page {page_number} does not exist. Total pages: {total_pages}",
            details={"totalPages": total_pages},
        )
        self.page_number = page_number
        self.total_pages = total_pages
