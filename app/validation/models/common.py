"""Common models used across the web API."""

from pydantic import BaseModel, ConfigDict

from app.exceptions import DatagenError


class ErrorResponse(BaseModel):
    """Error response structure.

    Detail keys (for example ``totalPages``) are merged into the top level of
    the serialized body.
    """

    model_config = ConfigDict(extra="allow")

    error: str
    code: str

    @classmethod
    def from_error(cls, error: DatagenError) -> "ErrorResponse":
        return cls(**error.to_dict())
