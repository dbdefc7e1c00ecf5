"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    code: Optional[str] = None
    details: Optional[dict[str, Any]] = None
