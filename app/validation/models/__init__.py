"""Data generation validation models.

This package contains the Pydantic models used by the generation service,
organized by logical grouping:
- session.py: Generation configuration bound to a pagination session
- inputs.py: Request body models
- outputs.py: Response models
- common.py: Shared error response model
"""

from .common import ErrorResponse
from .inputs import GenerateDataInput, PaginatedInput
from .outputs import GenerateDataOutput, PaginatedOutput, PaginationInfo, PingOutput
from .session import GenerationConfig

__all__ = [
    "ErrorResponse",
    "GenerateDataInput",
    "PaginatedInput",
    "GenerateDataOutput",
    "PaginatedOutput",
    "PaginationInfo",
    "PingOutput",
    "GenerationConfig",
]
