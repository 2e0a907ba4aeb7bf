"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salonflow.config import get_settings
from salonflow.application.validation import FieldError
from salonflow.domain.exceptions import AuthenticationError, MalformedPayloadError
from salonflow.infrastructure.database import Base, engine
from salonflow.infrastructure.logging.log_config import setup_logging
from salonflow.presentation.api.router import router as api_router
from salonflow.presentation.envelope import (
    INTERNAL_ERROR_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    error,
    validation_failed,
)

logger = logging.getLogger(__name__)

# Location prefixes FastAPI adds that are not part of the wire field name.
_LOC_SOURCES = frozenset({"body", "query", "path", "header", "cookie"})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create tables."""
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")

    yield

    await engine.dispose()


def _request_field_errors(exc: RequestValidationError) -> list[FieldError]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in _LOC_SOURCES:
            loc = loc[1:]
        errors.append(FieldError(field=".".join(loc) or "body", message=err.get("msg", "Invalid value")))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Route framework and domain exceptions into the uniform envelope."""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return validation_failed(_request_field_errors(exc))

    @app.exception_handler(MalformedPayloadError)
    async def handle_malformed_payload(request: Request, exc: MalformedPayloadError) -> JSONResponse:
        return error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(request: Request, exc: AuthenticationError) -> JSONResponse:
        logger.info("Rejected request to %s: %s", request.url.path, exc.reason)
        return error(status.HTTP_401_UNAUTHORIZED, UNAUTHORIZED_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "salonflow.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
