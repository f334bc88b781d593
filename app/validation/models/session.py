"""Generation configuration models."""

from pydantic import BaseModel, ConfigDict, Field


class GenerationConfig(BaseModel):
    """Shape of the records to generate.

    Frozen: a pagination session keeps the config it was created with for its
    whole lifetime.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    num_fields: int = Field(ge=1)
    num_objects: int = Field(default=0, ge=0)
    num_nesting: int = Field(default=0, ge=0)
    nested_fields: int = Field(default=0, ge=0)
    total_records: int = Field(default=1, ge=1)
    records_per_page: int = Field(default=100, ge=1)
    uniform_field_length: bool = False

    @property
    def total_pages(self) -> int:
        return -(-self.total_records // self.records_per_page)

    def records_in_page(self, page_number: int) -> int:
        """Number of records on ``page_number`` (1-based)."""
        start = (page_number - 1) * self.records_per_page
        return max(0, min(self.records_per_page, self.total_records - start))
