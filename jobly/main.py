"""
Jobly API - FastAPI application.

Companies post jobs, users apply to them. ``create_app`` wires middleware,
error mapping and routers; ``app`` is the instance uvicorn serves.
"""
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from jobly.api.routes import api_router
from jobly.core.config import settings
from jobly.core.database import close_db, init_db
from jobly.core.exceptions import APIException
from jobly.core.logging import RequestIDMiddleware, get_logger, setup_logging
from jobly.core.rate_limit import limiter
from jobly.schemas.base import ErrorResponse, format_validation_errors

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("jobly_starting", env=settings.environment, version=settings.app_version)
    await init_db()

    yield

    await close_db()
    logger.info("jobly_stopped")


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Any] = None,
) -> JSONResponse:
    """Every error leaves the API as ``{"error", "message", "details"}``."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=code, message=message, details=details).model_dump(mode="json"),
    )


async def handle_api_exception(request: Request, exc: APIException) -> JSONResponse:
    logger.info("request_rejected", status=exc.status_code, code=exc.code)
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bad bodies and path parameters are 400s, like every other invalid input."""
    return error_response(
        400,
        "BAD_REQUEST",
        "Request validation failed",
        format_validation_errors(exc.errors()),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    message = str(exc) if settings.debug else "An unexpected error occurred"
    return error_response(500, "INTERNAL_ERROR", message)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Companies, the jobs they post, and the users who apply to them",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(APIException, handle_api_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected)

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root():
        return {"name": settings.app_name, "version": settings.app_version}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("jobly.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
