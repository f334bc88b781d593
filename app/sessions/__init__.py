"""Pagination session package."""
from app.sessions.manager import PaginationManager
from app.sessions.storage import Session, SessionStore

__all__ = ["PaginationManager", "Session", "SessionStore"]
