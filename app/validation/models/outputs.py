"""Response models for the web API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PingOutput(BaseModel):
    """Output for ping."""

    model_config = ConfigDict(extra="ignore")

    status: str
    timestamp: str
    service: str
    version: str
    uptime_seconds: float


class PaginationInfo(BaseModel):
    """Navigation metadata for one page."""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_records: int = Field(alias="totalRecords")
    records_per_page: int = Field(alias="recordsPerPage")
    records_in_current_page: int = Field(alias="recordsInCurrentPage")
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")
    next_page_number: Optional[int] = Field(default=None, alias="nextPageNumber")
    prev_page_number: Optional[int] = Field(default=None, alias="prevPageNumber")
    next_url: Optional[str] = Field(default=None, alias="nextUrl")
    prev_url: Optional[str] = Field(default=None, alias="prevUrl")

    @classmethod
    def for_page(
        cls,
        page_number: int,
        total_pages: int,
        total_records: int,
        records_per_page: int,
        records_in_page: int,
        base_url: Optional[str] = None,
    ) -> "PaginationInfo":
        has_next = page_number < total_pages
        has_prev = page_number > 1
        next_page = page_number + 1 if has_next else None
        prev_page = page_number - 1 if has_prev else None
        return cls(
            current_page=page_number,
            total_pages=total_pages,
            total_records=total_records,
            records_per_page=records_per_page,
            records_in_current_page=records_in_page,
            has_next_page=has_next,
            has_previous_page=has_prev,
            next_page_number=next_page,
            prev_page_number=prev_page,
            next_url=f"{base_url}/{next_page}" if base_url and next_page else None,
            prev_url=f"{base_url}/{prev_page}" if base_url and prev_page else None,
        )


class PaginatedOutput(BaseModel):
    """One page of a pagination session."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    session_id: str = Field(alias="sessionId")
    data: List[Dict[str, Any]] = Field(default_factory=list)
    pagination: PaginationInfo

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class GenerateDataOutput(BaseModel):
    """Output for /generate-data."""

    success: bool = True
    data: List[Dict[str, Any]] = Field(default_factory=list)
