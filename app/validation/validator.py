"""Request validation against the configured generation limits."""

from typing import Optional

from app.config import LIMITS, FieldLimit, GenerationLimits
from app.exceptions import ValidationError
from app.validation.models import GenerateDataInput, GenerationConfig, PaginatedInput


class RequestValidator:
    """Turns request bodies into GenerationConfig objects or raises ValidationError."""

    def __init__(self, limits: GenerationLimits = LIMITS):
        self.limits = limits

    def validate_generate(self, data: GenerateDataInput) -> GenerationConfig:
        """Validate a one-shot generation request."""
        if not data.num_fields or data.num_objects is None or data.num_nesting is None or not data.num_records:
            raise ValidationError(
                "Missing required parameters: numFields, numObjects, numNesting, numRecords",
                details={"field": "body"},
            )
        nested_fields = self._nested_fields(data.nested_fields)
        self._check_shape(data.num_fields, data.num_objects, data.num_nesting, nested_fields)
        self._check(
            "numRecords", data.num_records, self.limits.num_records, "Number of records"
        )
        return GenerationConfig(
            num_fields=data.num_fields,
            num_objects=data.num_objects,
            num_nesting=data.num_nesting,
            nested_fields=nested_fields,
            total_records=data.num_records,
            records_per_page=data.num_records,
            uniform_field_length=self._uniform(data.uniform_field_length),
        )

    def validate_new_session(self, data: PaginatedInput) -> GenerationConfig:
        """Validate a request that starts a pagination session.

        Runs before anything is stored, so a rejected request leaves no
        session behind.
        """
        if data.page_number is not None and data.page_number != 1:
            raise ValidationError(
                "A new pagination session always starts at page 1. "
                "Omit pageNumber or pass sessionId to continue an existing session.",
                details={"field": "pageNumber"},
            )
        if not data.num_fields or data.num_objects is None or data.num_nesting is None or not data.total_records:
            raise ValidationError(
                "Missing required parameters: numFields, numObjects, numNesting, totalRecords",
                details={"field": "body"},
            )
        nested_fields = self._nested_fields(data.nested_fields)
        self._check_shape(data.num_fields, data.num_objects, data.num_nesting, nested_fields)

        total = self.limits.total_records
        if not total.contains(data.total_records):
            raise ValidationError(
                f"Total records must be between {total.min:,} and {total.max:,} for pagination",
                details={"field": "totalRecords"},
            )

        per_page = self.limits.records_per_page
        records_per_page = data.records_per_page
        if records_per_page is None:
            records_per_page = per_page.default
        self._check("recordsPerPage", records_per_page, per_page, "Records per page")

        return GenerationConfig(
            num_fields=data.num_fields,
            num_objects=data.num_objects,
            num_nesting=data.num_nesting,
            nested_fields=nested_fields,
            total_records=data.total_records,
            records_per_page=records_per_page,
            uniform_field_length=self._uniform(data.uniform_field_length),
        )

    def validate_page_number(self, page_number: Optional[int]) -> int:
        """Page numbers for a continued session: positive integers, default 1."""
        if page_number is None:
            return 1
        if page_number < 1:
            raise ValidationError(
                "Invalid page number. Must be a positive integer.",
                details={"field": "pageNumber"},
            )
        return page_number

    def _nested_fields(self, value: Optional[int]) -> int:
        return self.limits.nested_fields.default if value is None else value

    def _uniform(self, value: Optional[bool]) -> bool:
        return self.limits.uniform_field_length_default if value is None else value

    def _check_shape(self, num_fields: int, num_objects: int, num_nesting: int, nested_fields: int) -> None:
        self._check("numFields", num_fields, self.limits.num_fields, "Number of fields")
        self._check("numObjects", num_objects, self.limits.num_objects, "Number of objects")
        self._check("numNesting", num_nesting, self.limits.num_nesting, "Nesting depth")
        self._check(
            "nestedFields", nested_fields, self.limits.nested_fields, "Number of nested fields"
        )

    @staticmethod
    def _check(field: str, value: int, limit: FieldLimit, label: str) -> None:
        if not limit.contains(value):
            raise ValidationError(
                f"{label} must be between {limit.min} and {limit.max}",
                details={"field": field},
            )
