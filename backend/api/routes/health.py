"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    payment_gateway: str
    email: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_settings)):
    """
    Readiness check endpoint.

    Reports which external services are configured. Returns 503 until the
    database and payment gateway credentials are present; email is optional.
    """
    database = "configured" if settings.supabase_url and settings.supabase_service_role_key else "missing"
    gateway = "configured" if settings.razorpay_key_id and settings.razorpay_key_secret else "missing"
    email = "configured" if settings.smtp_host and settings.email_from else "disabled"

    ready = database == "configured" and gateway == "configured"
    body = ReadinessResponse(
        status="ready" if ready else "not_ready",
        database=database,
        payment_gateway=gateway,
        email=email,
    )
    if not ready:
        logger.warning("Readiness check failed: database=%s gateway=%s", database, gateway)
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body.model_dump())
    return body
