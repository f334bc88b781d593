"""Pagination manager for generated record sets."""

from typing import List, Optional

from app.exceptions import PageOutOfRangeError, SessionNotFoundError
from app.generation.assembler import Record, RecordAssembler, utc_now
from app.generation.normalizer import LengthSchema, sample_schema
from app.generation.seed import derive_seed
from app.logger import Logger
from app.sessions.storage import Session, SessionStore, short_id
from app.storage.base import PageStorageBase
from app.validation import RequestValidator
from app.validation.models import (
    GenerateDataInput,
    GenerationConfig,
    PaginatedInput,
    PaginatedOutput,
    PaginationInfo,
)


class PaginationManager:
    """Serves record sets page by page without storing the records.

    A page is rebuilt on every request from the session's stored config and
    length schema plus a seed derived from ``(session_id, page_number)``, so
    asking for the same page twice returns the same records.

    All methods are synchronous and CPU-bound; the web server calls them from
    a worker thread.
    """

    def __init__(
        self,
        session_store: SessionStore,
        logger: Logger,
        assembler: Optional[RecordAssembler] = None,
        validator: Optional[RequestValidator] = None,
        page_storage: Optional[PageStorageBase] = None,
    ) -> None:
        """
        Initialize the pagination manager.

        Args:
            session_store: In-memory session store
            logger: Logger instance
            assembler: Record assembler (default: a new RecordAssembler)
            validator: Request validator (default: configured limits)
            page_storage: Optional mirror for generated pages
        """
        self.session_store = session_store
        self.logger = logger
        self.assembler = assembler or RecordAssembler(logger)
        self.validator = validator or RequestValidator()
        self.page_storage = page_storage

    def handle(self, data: PaginatedInput, base_url: Optional[str] = None) -> PaginatedOutput:
        """
        Create a session or continue one, depending on ``data.session_id``.

        Args:
            data: Parsed request body
            base_url: Prefix for next/prev URLs, e.g. ``http://host/generate-paginated/<id>``
                      without the session id; None to omit URLs

        Raises:
            ValidationError: Bad parameters (nothing is stored)
            SessionNotFoundError: Unknown or expired session
            PageOutOfRangeError: Page beyond the session's last page
        """
        if data.is_new_session:
            return self.create_session(data, base_url=base_url)
        page_number = self.validator.validate_page_number(data.page_number)
        return self.get_page(data.session_id, page_number, base_url=base_url)

    def create_session(self, data: PaginatedInput, base_url: Optional[str] = None) -> PaginatedOutput:
        """Start a session and return its first page."""
        config = self.validator.validate_new_session(data)
        anchor = utc_now()

        length_schema: Optional[LengthSchema] = None
        if config.uniform_field_length:
            length_schema = sample_schema(config, anchor, assembler=self.assembler)

        session_id = self.session_store.create(config, length_schema, anchor)
        self.logger.info(
            "Pagination session created",
            session=short_id(session_id),
            total_records=config.total_records,
            records_per_page=config.records_per_page,
            total_pages=config.total_pages,
            num_fields=config.num_fields,
            uniform_length=config.uniform_field_length,
        )
        return self.get_page(session_id, 1, base_url=base_url)

    def get_page(
        self, session_id: str, page_number: int, base_url: Optional[str] = None
    ) -> PaginatedOutput:
        """Regenerate one page of an existing session."""
        session = self.session_store.get(session_id)
        if session is None:
            self.logger.warning("Session not found", session=short_id(session_id))
            raise SessionNotFoundError(session_id)

        total_pages = session.config.total_pages
        if page_number < 1 or page_number > total_pages:
            self.logger.warning(
                "Page out of range",
                session=short_id(session_id),
                page=page_number,
                total_pages=total_pages,
            )
            raise PageOutOfRangeError(page_number, total_pages)

        return self._render_page(session, page_number, base_url)

    def generate(self, data: GenerateDataInput) -> List[Record]:
        """One-shot generation without a session.

        With uniform length a schema is sampled for this request only.
        """
        config = self.validator.validate_generate(data)
        anchor = utc_now()
        length_schema = (
            sample_schema(config, anchor, assembler=self.assembler)
            if config.uniform_field_length
            else None
        )
        records = self.assembler.generate_records(
            config, config.total_records, page_seed=None, schema=length_schema, anchor=anchor
        )
        self.logger.info(
            "Records generated",
            records=len(records),
            num_fields=config.num_fields,
            uniform_length=config.uniform_field_length,
        )
        return records

    def page_records(self, session: Session, page_number: int) -> List[Record]:
        """The records of one page; pure given the session and page number."""
        config: GenerationConfig = session.config
        return self.assembler.generate_records(
            config,
            config.records_in_page(page_number),
            page_seed=derive_seed(session.session_id, page_number),
            schema=session.length_schema,
            anchor=session.anchor,
        )

    def _render_page(
        self, session: Session, page_number: int, base_url: Optional[str]
    ) -> PaginatedOutput:
        config = session.config
        records = self.page_records(session, page_number)
        self._mirror_page(session.session_id, page_number, records)

        self.logger.info(
            "Page generated",
            session=short_id(session.session_id),
            page=page_number,
            total_pages=config.total_pages,
            records=len(records),
        )
        return PaginatedOutput(
            session_id=session.session_id,
            data=records,
            pagination=PaginationInfo.for_page(
                page_number=page_number,
                total_pages=config.total_pages,
                total_records=config.total_records,
                records_per_page=config.records_per_page,
                records_in_page=len(records),
                base_url=f"{base_url}/{session.session_id}" if base_url else None,
            ),
        )

    def _mirror_page(self, session_id: str, page_number: int, records: List[Record]) -> None:
        """Best-effort copy to the page mirror; failures are logged, never raised."""
        if self.page_storage is None:
            return
        try:
            self.page_storage.save_page(session_id, page_number, records)
        except Exception as e:
            self.logger.warning(
                "Page mirror unavailable, continuing without it",
                session=short_id(session_id),
                page=page_number,
                error=str(e),
                error_type=type(e).__name__,
            )
