"""
FastAPI application factory.

Creates and configures the FastAPI application instance, registers every
module router under /api and maps domain exceptions to HTTP responses.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NoDevBuildError,
    NotFoundError,
    ServiceTimeoutError,
    ValidationError,
)
from modules.payments.exceptions import GatewayError
from modules.payments.routes import router as payment_router
from modules.users.routes import router as auth_router
from modules.catalog.routes import router as courses_router
from modules.outreach.routes import (
    collaboration_router,
    contact_router,
    newsletter_router,
)

from .dependencies import get_container
from .models.errors import ErrorResponse
from .routes import health

logger = logging.getLogger(__name__)

# Most specific first; the first matching base class decides the status.
ERROR_STATUS_CODES: list[tuple[type[NoDevBuildError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ServiceTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (GatewayError, status.HTTP_400_BAD_REQUEST),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
]


def status_code_for(exc: NoDevBuildError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_domain_error(request: Request, exc: NoDevBuildError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info(
            "%s %s rejected (%s %s): %s",
            request.method, request.url.path, status_code, exc.code, exc.message,
        )
    return _error_response(status_code, ErrorResponse(**exc.to_dict()))


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors reduced to JSON-safe location/message pairs."""
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("%s %s invalid request: %s", request.method, request.url.path, exc.errors())
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(
            error="Invalid request",
            code="INVALID_REQUEST",
            details={"errors": jsonable_errors(exc)},
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error="Internal server error", code="INTERNAL_ERROR"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    logger.info("Shutting down %s", settings.app_name)
    await get_container().shutdown()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Courses, memberships and payments for the NoDevBuild platform",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Error mapping
    app.add_exception_handler(NoDevBuildError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(payment_router, prefix="/api/payment", tags=["payment"])
    app.include_router(courses_router, prefix="/api/courses", tags=["courses"])
    app.include_router(collaboration_router, prefix="/api/collaboration", tags=["collaboration"])
    app.include_router(contact_router, prefix="/api/contact", tags=["contact"])
    app.include_router(newsletter_router, prefix="/api/newsletter", tags=["newsletter"])

    return app


# Application instance for uvicorn
app = create_app()
