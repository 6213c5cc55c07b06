"""
FastAPI Style Match Backend
Main application entry point
"""
import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from stylematch import __version__
from stylematch.config import Settings, get_settings
from stylematch.dependencies import StyleMatchServices
from stylematch.errors import StyleMatchError
from stylematch.models.analysis import ErrorResponse
from stylematch.routers import analyze, health, style_match, styles
from stylematch.services.storage_service import GENERATED_MOUNT

logger = structlog.get_logger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog on top of stdlib logging"""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper(), logging.INFO))
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _error_response(exc: Exception, message: str, status_code: int, settings: Settings) -> JSONResponse:
    details = None
    if status_code >= 500 and settings.include_error_details:
        details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(
    settings: Optional[Settings] = None,
    services: Optional[StyleMatchServices] = None,
) -> FastAPI:
    """Build the API with explicitly injected settings and services"""
    settings = settings or get_settings()
    services = services or StyleMatchServices.from_settings(settings)

    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings.output_path.mkdir(parents=True, exist_ok=True)
        logger.info(
            "StyleMatch API starting",
            port=settings.port,
            generated_url=f"{settings.public_url}{GENERATED_MOUNT}/",
            openai_configured=settings.is_openai_configured,
            replicate_configured=settings.is_replicate_configured,
        )
        yield
        logger.info("Shutdown complete")

    app = FastAPI(
        title="StyleMatch API",
        description="Architectural photo analysis and AI style transformation",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "message": "StyleMatch API is running",
            "version": __version__,
        }

    # Include API routers
    app.include_router(analyze.router, prefix="/api", tags=["Analyze"])
    app.include_router(style_match.router, prefix="/api", tags=["Style Match"])
    app.include_router(styles.router, prefix="/api", tags=["Styles"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    # Generated images; the directory is created at startup
    app.mount(
        GENERATED_MOUNT,
        StaticFiles(directory=settings.output_path, check_dir=False),
        name="generated",
    )

    @app.exception_handler(StyleMatchError)
    async def style_match_exception_handler(request: Request, exc: StyleMatchError):
        if exc.status_code >= 500:
            logger.error("Request failed", path=request.url.path, error=exc.message, exc_info=exc)
        else:
            logger.warning("Rejected request", path=request.url.path, error=exc.message)
        return _error_response(exc, exc.message, exc.status_code, settings)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # A text part or a nameless file in the image slot fails form parsing
        if any(error.get("loc", ())[-1:] == ("image",) for error in exc.errors()):
            message = "No image uploaded"
        else:
            message = "Invalid request"
        logger.warning("Rejected request", path=request.url.path, error=message)
        return _error_response(exc, message, 400, settings)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error", path=request.url.path, error=str(exc), exc_info=exc)
        return _error_response(exc, str(exc) or "Internal server error", 500, settings)

    return app


app = create_app()
