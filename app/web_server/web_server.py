"""Datagen Web Server - REST API for fake record generation.

Exposes:
- Health and limits endpoints (/ping, /config)
- One-shot generation (/generate-data, /data)
- Paginated generation backed by in-memory sessions (/generate-paginated)

Errors are returned as ``{"error": message, "code": code, ...}`` with a 4xx/5xx
status; there is never a partial success.
"""

import contextlib
import time
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from app import __version__
from app.config import LIMITS, Config
from app.exceptions import DatagenError, ValidationError
from app.housekeeper import Housekeeper
from app.logger import Logger, session_logger
from app.sessions import PaginationManager, SessionStore
from app.sessions.storage import short_id
from app.storage.base import PageStorageBase
from app.validation.models import (
    ErrorResponse,
    GenerateDataInput,
    GenerateDataOutput,
    PaginatedInput,
    PingOutput,
)

SERVICE_NAME = "datagen"


class DatagenWebServer:
    """FastAPI web server for fake data generation."""

    def __init__(
        self,
        session_store: Optional[SessionStore] = None,
        page_storage: Optional[PageStorageBase] = None,
        enable_housekeeper: bool = True,
        housekeeping_interval_seconds: Optional[int] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the datagen web server.

        Args:
            session_store: Pagination session store (default: new store using the configured TTL)
            page_storage: Optional page mirror; None disables mirroring
            enable_housekeeper: Run the background sweeper while the app is up
            housekeeping_interval_seconds: Sweeper interval override
            logger: Logger instance (default: shared console logger)

        Endpoints exposed:
            GET /ping - Health check
            GET /config - Generation limits
            POST /generate-data - Records wrapped in {success, data}
            POST /data - Bare record array
            POST /generate-paginated - Create or continue a pagination session
            POST /generate-paginated/{session_id} - Continue a session
            GET /generate-paginated/{session_id}/{page} - Continue a session
        """
        self.logger: Logger = logger or session_logger
        self.started_at = time.time()
        if session_store is None:
            session_store = SessionStore(
                ttl_seconds=Config.get_session_ttl_seconds(), logger=self.logger
            )
        self.session_store = session_store
        self.page_storage = page_storage
        self.pagination = PaginationManager(
            session_store=self.session_store,
            logger=self.logger,
            page_storage=page_storage,
        )
        self.housekeeper: Optional[Housekeeper] = None
        if enable_housekeeper:
            self.housekeeper = Housekeeper(
                session_store=self.session_store,
                page_storage=page_storage,
                interval_seconds=housekeeping_interval_seconds,
                logger=self.logger,
            )

        self.app = FastAPI(
            title=SERVICE_NAME,
            description="Configurable fake data generator with deterministic pagination",
            version=__version__,
            lifespan=self._lifespan,
        )

        self.logger.info(
            "Datagen web server initialized",
            session_ttl_seconds=self.session_store.ttl_seconds,
            page_mirror=type(page_storage).__name__ if page_storage else None,
            housekeeper=enable_housekeeper,
        )
        self._setup_routes()

    @contextlib.asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        if self.housekeeper is not None:
            self.housekeeper.start()
        try:
            yield
        finally:
            if self.housekeeper is not None:
                self.housekeeper.stop()

    def _error_response(self, route: str, error: Exception) -> JSONResponse:
        """Map an exception to a JSON error response and log it."""
        if isinstance(error, DatagenError):
            status = error.status_code
            body = ErrorResponse.from_error(error).model_dump()
            self.logger.warning(
                f"{route} failed",
                code=error.code,
                error=error.message,
                status=status,
            )
        else:
            status = 500
            body = {"error": str(error), "code": "INTERNAL_ERROR"}
            self.logger.error(
                f"{route} failed (unexpected)",
                error=str(error),
                error_type=type(error).__name__,
                status=status,
            )
        return JSONResponse(status_code=status, content=body)

    @staticmethod
    def _parse(model, body: Optional[Dict[str, Any]]):
        """Validate a request body, turning pydantic errors into ValidationError."""
        if body is None:
            body = {}
        try:
            return model.model_validate(body)
        except PydanticValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            raise ValidationError(
                f"Invalid value for '{location}': {first.get('msg', 'invalid')}",
                details={"field": location},
            )

    @staticmethod
    def _pagination_base_url(request: Request) -> str:
        return f"{str(request.base_url).rstrip('/')}/generate-paginated"

    def _setup_routes(self):
        """Set up all API routes."""

        @self.app.exception_handler(RequestValidationError)
        async def request_validation_handler(request: Request, exc: RequestValidationError):
            errors = exc.errors()
            message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
            return self._error_response(
                f"{request.method} {request.url.path}",
                ValidationError(f"Invalid request: {message}"),
            )

        # ====================================================================
        # SERVICE ENDPOINTS
        # ====================================================================

        @self.app.get("/ping")
        async def ping():
            """
            Health check endpoint.

            Returns:
                {status: "ok", timestamp: ISO8601, service: "datagen", version, uptime_seconds}
            """
            current_time = datetime.now().isoformat()
            self.logger.debug("GET /ping", timestamp=current_time)
            output = PingOutput(
                status="ok",
                timestamp=current_time,
                service=SERVICE_NAME,
                version=__version__,
                uptime_seconds=round(time.time() - self.started_at, 3),
            )
            return JSONResponse(content=output.model_dump())

        @self.app.get("/config")
        async def get_config():
            """Generation limits accepted by the generation endpoints."""
            return JSONResponse(
                content={"success": True, "config": {"limits": LIMITS.to_public_dict()}}
            )

        # ====================================================================
        # ONE-SHOT GENERATION
        # ====================================================================

        async def _generate(route: str, body: Optional[Dict[str, Any]]):
            data = self._parse(GenerateDataInput, body)
            self.logger.info(
                route,
                num_records=data.num_records,
                num_fields=data.num_fields,
                uniform=bool(data.uniform_field_length),
            )
            return await run_in_threadpool(self.pagination.generate, data)

        @self.app.post("/generate-data")
        async def generate_data(body: Optional[Dict[str, Any]] = None):
            """Generate records and wrap them as {success: true, data: [...]}."""
            try:
                records = await _generate("POST /generate-data", body)
            except Exception as e:
                return self._error_response("/generate-data", e)
            return JSONResponse(content=GenerateDataOutput(data=records).model_dump())

        @self.app.post("/data")
        async def data_only(body: Optional[Dict[str, Any]] = None):
            """Generate records and return the bare array."""
            try:
                records = await _generate("POST /data", body)
            except Exception as e:
                return self._error_response("/data", e)
            return JSONResponse(content=records)

        # ====================================================================
        # PAGINATED GENERATION
        # ====================================================================

        async def _paginate(route: str, request: Request, data: PaginatedInput):
            self.logger.info(
                route,
                session=short_id(data.session_id) if data.session_id else "(new)",
                page=data.page_number,
                total_records=data.total_records,
                records_per_page=data.records_per_page,
                uniform=bool(data.uniform_field_length),
            )
            try:
                output = await run_in_threadpool(
                    self.pagination.handle, data, self._pagination_base_url(request)
                )
            except Exception as e:
                return self._error_response(route, e)
            return JSONResponse(content=output.to_response())

        @self.app.post("/generate-paginated")
        async def generate_paginated(request: Request, body: Optional[Dict[str, Any]] = None):
            """
            Create a pagination session (no sessionId) or fetch a page of one.

            Request body:
            - sessionId: Existing session; omit or leave empty to start a new one
            - pageNumber: Page to fetch (must be 1 or absent for a new session)
            - numFields, numObjects, numNesting, totalRecords, nestedFields,
              uniformFieldLength, recordsPerPage: Generation config for a new session
            """
            try:
                data = self._parse(PaginatedInput, body)
            except ValidationError as e:
                return self._error_response("/generate-paginated", e)
            return await _paginate("POST /generate-paginated", request, data)

        @self.app.post("/generate-paginated/{session_id}")
        async def continue_paginated(
            session_id: str, request: Request, body: Optional[Dict[str, Any]] = None
        ):
            """Fetch a page of an existing session; body carries pageNumber."""
            try:
                data = self._parse(PaginatedInput, body)
            except ValidationError as e:
                return self._error_response("/generate-paginated/{id}", e)
            data = data.model_copy(update={"session_id": session_id})
            return await _paginate("POST /generate-paginated/{id}", request, data)

        @self.app.get("/generate-paginated/{session_id}/{page}")
        async def get_paginated(session_id: str, page: str, request: Request):
            """Fetch a page of an existing session by URL."""
            try:
                page_number = int(page)
            except ValueError:
                return self._error_response(
                    "/generate-paginated/{id}/{page}",
                    ValidationError("Invalid page number. Must be a positive integer."),
                )
            data = PaginatedInput(session_id=session_id, page_number=page_number)
            return await _paginate("GET /generate-paginated/{id}/{page}", request, data)
