"""
Payments module exceptions.

These exceptions are raised by the ledger, reconciler and gateway client
and are mapped to HTTP responses by the API error handler.
"""

from typing import Optional

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    ConflictError,
    ExternalServiceError,
    ServiceTimeoutError,
)


class OrderNotFoundError(NotFoundError):
    """
    Raised when an order does not exist or belongs to someone else.

    The two causes share one error so callers cannot use it to discover other
    users' orders.
    """

    def __init__(self, external_order_id: str):
        super().__init__(
            "Order not found or unauthorized access",
            code="ORDER_NOT_FOUND",
            details={"order_id": external_order_id},
        )


class InvalidSignatureError(ValidationError):
    """Raised when a completion callback's signature does not match."""

    def __init__(self, external_order_id: str):
        super().__init__(
            "Invalid payment signature",
            code="INVALID_SIGNATURE",
            details={"order_id": external_order_id},
        )


class InvalidOrderTransitionError(ConflictError):
    """Raised when a callback asks a terminal order to change state."""

    def __init__(self, external_order_id: str, current: str, requested: str):
        super().__init__(
            f"Order is already {current}; cannot mark it {requested}",
            code="INVALID_ORDER_TRANSITION",
            details={
                "order_id": external_order_id,
                "current_status": current,
                "requested_status": requested,
            },
        )


class GatewayError(ExternalServiceError):
    """Raised when the payment gateway answers with a non-success response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            service="razorpay",
            code="GATEWAY_ERROR",
            details={"status_code": status_code} if status_code else {},
        )


class GatewayTimeoutError(ServiceTimeoutError):
    """Raised when the payment gateway does not answer in time."""

    def __init__(self, timeout: float):
        super().__init__(
            f"Payment gateway did not respond within {timeout:g}s; please retry",
            service="razorpay",
            code="GATEWAY_TIMEOUT",
            details={"timeout_seconds": timeout, "retryable": True},
        )
