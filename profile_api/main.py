"""
Profile API FastAPI Application

Entry point exposing profile, sub-resource, journal and auth routes.
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging
import time
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from profile_api.api.routes import api_router
from profile_api.core.config import Settings, settings as default_settings
from profile_api.core.errors import ProfileAPIError
from profile_api.core.logging import setup_logging
from profile_api.db.session import Database
from profile_api.services.storage_service import ImageStore, LocalImageStore, create_image_store

# Configure logging
logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error surfaced to clients onto an ``{"error": ...}`` body."""

    @app.exception_handler(ProfileAPIError)
    async def handle_api_error(request: Request, exc: ProfileAPIError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    image_store: Optional[ImageStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use, the environment-loaded ones if omitted
        database: Pre-built Database; one is created (and disposed on shutdown) if omitted
        image_store: Pre-built image store, chosen from settings if omitted

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings
    setup_logging(settings)

    owns_database = database is None
    database = database or Database(settings)
    image_store = image_store or create_image_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if settings.auto_create_tables:
            await database.create_all()
        logger.info(f"{settings.app_name} started ({settings.app_env})")

        yield

        # Shutdown
        if owns_database:
            await database.dispose()
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        description="Profile, skills, experience, qualifications, certificates and versioned journal API.",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.image_store = image_store

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        started = time.perf_counter()

        response = await call_next(request)

        duration_ms = round((time.perf_counter() - started) * 1000, 3)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms} ms)",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    # Serve locally stored images at the URLs the store hands out
    if isinstance(image_store, LocalImageStore):
        app.mount(
            image_store.url_prefix,
            StaticFiles(directory=str(image_store.base_path)),
            name="images",
        )
        logger.debug(f"Mounted image directory {image_store.base_path} at {image_store.url_prefix}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "profile_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=default_settings.is_development,
        log_level="info"
    )
