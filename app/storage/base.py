"""Base storage interface for mirrored pages

Defines the abstract interface that all page mirror implementations must
follow. Mirroring is best-effort: the pagination layer logs and ignores any
exception raised here.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class PageStorageBase(ABC):
    """Abstract base class for page mirror implementations"""

    @abstractmethod
    def save_page(self, session_id: str, page_number: int, records: List[Dict[str, Any]]) -> str:
        """
        Persist one generated page

        Args:
            session_id: Session the page belongs to
            page_number: 1-based page number
            records: Generated records

        Returns:
            Identifier of the stored page

        Raises:
            RuntimeError: If save fails
        """
        pass

    @abstractmethod
    def get_page(self, session_id: str, page_number: int) -> Optional[List[Dict[str, Any]]]:
        """
        Retrieve a mirrored page

        Returns:
            Records or None if the page is not stored
        """
        pass

    @abstractmethod
    def delete_session(self, session_id: str) -> int:
        """
        Delete every mirrored page of a session

        Returns:
            Number of pages deleted
        """
        pass

    @abstractmethod
    def list_pages(self, session_id: Optional[str] = None) -> List[str]:
        """
        List stored page identifiers

        Args:
            session_id: Optional session to filter by
        """
        pass

    @abstractmethod
    def purge(self, max_age_seconds: int = 0) -> int:
        """
        Delete pages older than the given age

        Args:
            max_age_seconds: Delete pages older than this many seconds. 0 means delete all.

        Returns:
            Number of pages deleted

        Raises:
            RuntimeError: If purge fails
        """
        pass
