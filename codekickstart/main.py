"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from codekickstart.config import configure_logging, get_settings
from codekickstart.core import container
from codekickstart.database import (
    create_tables,
    dispose_engine,
    initialize_database,
    session_scope,
)
from codekickstart.domain.bookmarks.exceptions import BookmarkToggleConflictError
from codekickstart.domain.common.exceptions import (
    AuthenticationRequiredError,
    DomainError,
    EntityNotFoundError,
)
from codekickstart.exceptions import CodeKickstartError
from codekickstart.infrastructure.bookmarks.routers import bookmarks
from codekickstart.infrastructure.catalog.routers import languages
from codekickstart.infrastructure.common.routers import settings as settings_router
from codekickstart.infrastructure.identity.routers import auth, users
from codekickstart.infrastructure.tutor.routers import chat

settings = get_settings()
logger = structlog.get_logger(__name__)


def _seed_catalog() -> None:
    """Seed the catalog with the reference languages if it is empty."""
    with session_scope(settings) as session, container.db.override(session):
        seed_status = container.catalog_use_case().seed_languages()
    logger.info("startup_seed_finished", status=seed_status.value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup/shutdown events."""
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    create_tables()
    logger.info(
        "api_startup",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
    )

    if settings.SEED_LANGUAGES_ON_STARTUP:
        _seed_catalog()

    yield

    dispose_engine()
    logger.info("api_shutdown")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Programming language catalog with bookmarks and an AI tutor",
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    redoc_url=f"{settings.API_V1_PREFIX}/redoc",
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


@app.exception_handler(CodeKickstartError)
async def codekickstart_exception_handler(
    request: Request, exc: CodeKickstartError
) -> JSONResponse:
    """Handle application errors that carry their own status code."""
    logger.error("application_error", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain errors into HTTP responses."""
    if isinstance(exc, AuthenticationRequiredError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(exc, EntityNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})
    if isinstance(exc, BookmarkToggleConflictError):
        logger.warning("bookmark_toggle_conflict", path=request.url.path, **exc.details)
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})

    logger.info("domain_error", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


app.include_router(languages.router, prefix=settings.API_V1_PREFIX)
app.include_router(bookmarks.router, prefix=settings.API_V1_PREFIX)
app.include_router(chat.router, prefix=settings.API_V1_PREFIX)
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)
app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Welcome to CodeKickstart API"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    """API v1 root endpoint."""
    return {
        "message": "CodeKickstart API v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }
