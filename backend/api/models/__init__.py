"""
API-level response models shared by all routers.
"""

from .errors import ErrorResponse

__all__ = ["ErrorResponse"]
