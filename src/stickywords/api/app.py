"""
FastAPI Application Factory & Configuration.

This module initializes the FastAPI application instance. It is responsible for:
1.  **Middleware Setup**: CORS for the browser front-end.
2.  **Exception Handling**: Handlers that turn pipeline failures and unexpected
    errors into structured JSON (404 "No quote found." / 500 "Failed to fetch quote").
3.  **Routing**: Mounting the word router and the health probe.
4.  **Wiring**: Building the :class:`WordService` (sources + request quota)
    and attaching it to ``app.state``.

Design Pattern
--------------
We use an **Application Factory** pattern (`create_app`). Tests pass their own
settings or a fully faked service; production builds everything from the
environment.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stickywords import __version__
from stickywords.api.errors import SERVICE_ERROR_MESSAGE, WordCardUnavailable
from stickywords.api.routers import words
from stickywords.api.schemas import ErrorResponse, HealthResponse
from stickywords.core.settings import Settings, get_logger, load_settings
from stickywords.pipelines.service import WordService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """ASGI lifespan: log configuration on startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting Sticky Words API (env=%s, stands4_configured=%s, daily_limit=%d)",
        settings.environment,
        settings.stands4_configured,
        settings.daily_request_limit,
    )
    if not settings.stands4_configured:
        logger.warning("STANDS4_UID / STANDS4_API_KEY missing; /api/quote will return 500")

    yield

    logger.info("Shutting down Sticky Words API")


def create_app(
    settings: Settings | None = None,
    *,
    service: WordService | None = None,
) -> FastAPI:
    """
    Construct and configure the Sticky Words FastAPI application.

    Parameters
    ----------
    settings:
        Configuration to use; defaults to the cached environment settings.
    service:
        Pre-built service (tests inject fakes here); built from ``settings``
        when omitted.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Sticky Words API",
        description="Vocabulary words from quotes and screenplays",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.word_service = service or WordService.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, restrict this to the front-end origin.
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(WordCardUnavailable)
    async def word_card_unavailable_handler(
        request: Request, exc: WordCardUnavailable
    ) -> JSONResponse:
        """Map pipeline errors to 404 (no quote) or 500 (upstream failure)."""
        if exc.status_code >= 500:
            logger.error("Word card failed for %s: %s", request.url.path, exc.error.message)
        body = ErrorResponse(error=exc.public_message)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler so unexpected failures still return structured JSON."""
        logger.exception("Unhandled error on %s", request.url.path)
        body = ErrorResponse(error=SERVICE_ERROR_MESSAGE, detail=str(exc))
        return JSONResponse(status_code=500, content=body.model_dump())

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(words.router)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check() -> HealthResponse:
        """Simple liveness probe."""
        return HealthResponse(status="ok", environment=settings.environment, version=__version__)

    return app


__all__ = ["create_app"]
