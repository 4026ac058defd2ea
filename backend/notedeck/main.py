"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notedeck.config import configure_logging, get_settings
from notedeck.database import dispose_engine, initialize_database
from notedeck.domain.common.exceptions import DomainError
from notedeck.infrastructure.learning.routers import flashcard_sets
from notedeck.infrastructure.notes.routers import notes

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Domain invariant violations are client input errors."""
    logger.info("domain_error", path=request.url.path, error=exc.message)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"kind": "invalid_input", "message": exc.message}},
    )


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(notes.router, prefix=settings.API_V1_PREFIX)
    app.include_router(flashcard_sets.router, prefix=settings.API_V1_PREFIX)

    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": settings.VERSION}

    return app


app = create_application()
