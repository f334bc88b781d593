"""Request body models for the web API.

Bodies use the camelCase names of the public API; the models expose
snake_case attributes. Limit checks live in ``app.validation.validator`` so
that error messages stay in one place.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateDataInput(BaseModel):
    """Input for /generate-data and /data.

    Args:
        num_fields: Top-level fields per record
        num_objects: Nested objects per record and per nesting level
        num_nesting: Nesting depth
        num_records: Records to generate
        nested_fields: Fields per nested object (defaults to the configured default)
        uniform_field_length: Pad/truncate string fields to one length per type
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    num_fields: Optional[int] = Field(default=None, alias="numFields")
    num_objects: Optional[int] = Field(default=None, alias="numObjects")
    num_nesting: Optional[int] = Field(default=None, alias="numNesting")
    num_records: Optional[int] = Field(default=None, alias="numRecords")
    nested_fields: Optional[int] = Field(default=None, alias="nestedFields")
    uniform_field_length: Optional[bool] = Field(default=None, alias="uniformFieldLength")


class PaginatedInput(BaseModel):
    """Input for /generate-paginated.

    Args:
        session_id: Existing session to continue; absent or empty starts a new one
        page_number: Page to return (1-based); must be 1 or absent for a new session
        num_fields, num_objects, num_nesting, nested_fields, uniform_field_length:
            As for GenerateDataInput; ignored when continuing a session
        total_records: Records across all pages
        records_per_page: Page size
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    page_number: Optional[int] = Field(default=None, alias="pageNumber")
    num_fields: Optional[int] = Field(default=None, alias="numFields")
    num_objects: Optional[int] = Field(default=None, alias="numObjects")
    num_nesting: Optional[int] = Field(default=None, alias="numNesting")
    total_records: Optional[int] = Field(default=None, alias="totalRecords")
    nested_fields: Optional[int] = Field(default=None, alias="nestedFields")
    uniform_field_length: Optional[bool] = Field(default=None, alias="uniformFieldLength")
    records_per_page: Optional[int] = Field(default=None, alias="recordsPerPage")

    @property
    def is_new_session(self) -> bool:
        return not self.session_id
