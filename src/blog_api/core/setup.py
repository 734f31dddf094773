import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import _AsyncGeneratorContextManager, asynccontextmanager
from typing import Any

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..middleware.client_cache_middleware import ClientCacheMiddleware
from ..schemas.base import ErrorResponse
from .config import EnvironmentOption, Settings
from .db.database import create_tables
from .logger import configure_logging
from .utils import cache

LOGGER = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump(by_alias=True))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    LOGGER.exception(f"Database error on {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(SQLAlchemyError, database_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)


def lifespan_factory(
    settings: Settings,
    create_tables_on_start: bool = True,
) -> Callable[[FastAPI], _AsyncGeneratorContextManager[Any]]:
    """Factory to create a lifespan async context manager for a FastAPI app."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        cache.create_redis_cache_pool(settings.REDIS_CACHE_URL)

        if create_tables_on_start:
            await create_tables()
            LOGGER.info("Database tables ensured")

        try:
            yield
        finally:
            await cache.close_redis_cache_pool()

    return lifespan


def create_application(
    router: APIRouter,
    settings: Settings,
    lifespan: Callable[[FastAPI], _AsyncGeneratorContextManager[Any]] | None = None,
    **kwargs: Any,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers the router, the error envelope handlers, CORS and client-side
    caching. API docs are disabled in production.
    """
    configure_logging()

    to_update = {
        "title": settings.APP_NAME,
        "description": settings.APP_DESCRIPTION,
        "version": settings.APP_VERSION,
    }
    kwargs.update({key: value for key, value in to_update.items() if value is not None})

    if settings.ENVIRONMENT == EnvironmentOption.PRODUCTION:
        kwargs.update({"docs_url": None, "redoc_url": None, "openapi_url": None})

    application = FastAPI(lifespan=lifespan, **kwargs)
    application.include_router(router)
    register_exception_handlers(application)

    application.add_middleware(ClientCacheMiddleware, max_age=settings.CLIENT_CACHE_MAX_AGE)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS_LIST,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return application
