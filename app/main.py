"""FastAPI application for the Omedeto API."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router
from app.config.api import ApiSettings, get_settings
from app.core.exceptions import OmedetoException
from app.core.i18n import resolve_locale, translate
from app.core.logging import ACCESS_LOGGER, setup_logging
from app.database.connection import DatabaseManager

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER)

_HTTP_ERROR_KEYS = {
    status.HTTP_404_NOT_FOUND: "ROUTE_NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    settings: ApiSettings = app.state.settings
    logger.info(f"Starting {settings.SERVICE_NAME} ({settings.ENVIRONMENT})...")

    db_manager = DatabaseManager(settings)
    app.state.db_manager = db_manager

    if settings.DATABASE_AUTO_CREATE:
        try:
            await run_in_threadpool(db_manager.create_tables)
        except SQLAlchemyError as e:
            logger.error(f"Could not create database tables: {e}")

    if await run_in_threadpool(db_manager.health_check):
        logger.info("Database connection successful")
    else:
        logger.warning("Database unreachable; starting without storage")

    yield

    logger.info(f"Shutting down {settings.SERVICE_NAME}...")
    db_manager.close()


def _error_response(request: Request, status_code: int, key: str, headers=None) -> JSONResponse:
    settings: ApiSettings = request.app.state.settings
    locale = resolve_locale(request.headers.get("accept-language"), settings.DEFAULT_LOCALE)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": translate(key, locale)},
        headers=headers,
    )


async def handle_omedeto_exception(request: Request, exc: OmedetoException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{exc.error_code} on {request.method} {request.url.path}: "
            f"{exc.message} {exc.details}"
        )
    else:
        logger.info(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error_response(request, exc.status_code, exc.error_code, headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "MISSING_FIELDS")


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    key = _HTTP_ERROR_KEYS.get(exc.status_code, "INTERNAL_ERROR")
    return _error_response(request, exc.status_code, key, getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR")


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    """Build the application; settings come from the environment when omitted."""
    if settings is None:
        settings = get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        description="Recognition messages API",
        version=settings.VERSION,
        docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With", "Accept"],
        expose_headers=["Content-Length"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    app.add_exception_handler(OmedetoException, handle_omedeto_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    run()
