"""FastAPI application entry point."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from estimator import __version__
from estimator.api import register_routes
from estimator.core.exceptions import SessionNotFoundError, UnknownServiceKeyError
from estimator.core.logging import configure_logging
from estimator.core.settings import settings


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Manages the application lifecycle."""
    configure_logging()
    logger.info("Estimator {} started ({})", __version__, settings.environment)
    yield
    logger.info("Estimator stopped")


def setup_middlewares(app: FastAPI) -> None:
    """Registers application middleware."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Configures FastAPI error handlers."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handles request validation errors."""
        logger.warning(
            "Validation error for path {}: {}",
            request.url.path,
            exc.errors(),
        )
        return JSONResponse(
            status_code=422,
            content={
                "detail": jsonable_errors(exc),
                "message": "Request data failed validation.",
            },
        )

    @app.exception_handler(UnknownServiceKeyError)
    async def unknown_service_handler(
        request: Request,
        exc: UnknownServiceKeyError,
    ) -> JSONResponse:
        """Handles requests naming a service outside the catalog."""
        logger.error("Unknown service key {} for path {}", exc.key, request.url.path)
        return JSONResponse(
            status_code=404,
            content={"detail": str(exc), "key": exc.key},
        )

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(
        request: Request,
        exc: SessionNotFoundError,
    ) -> JSONResponse:
        """Handles requests for missing sessions."""
        return JSONResponse(
            status_code=404,
            content={"detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handles unexpected exceptions."""
        logger.exception(
            "Unhandled exception for path {}",
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error."},
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    """Drops non-serialisable context from validation errors."""
    return [
        {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
        for error in exc.errors()
    ]


def create_application() -> FastAPI:
    """Creates and configures the FastAPI instance."""
    app = FastAPI(
        title="School Accounting Services Estimator",
        version=__version__,
        description="Preliminary pricing and proposals for discovery calls.",
        lifespan=lifespan,
    )

    setup_middlewares(app)
    register_exception_handlers(app)
    register_routes(app)

    @app.get("/", tags=["health"])
    async def root() -> dict[str, str]:
        """Returns the service status."""
        return {
            "status": "ok",
            "message": "Estimator is ready.",
        }

    return app


app = create_application()
