"""
Payments module.

Handles order creation through Razorpay and reconciliation of checkout
callbacks into purchase history and membership.

Public API:
- OrderLedger: creates orders and links gateway order IDs
- PaymentReconciler: verifies callbacks and completes orders exactly once
- IOrderRepository / IPaymentGateway: storage and gateway interfaces
- Payment exceptions: OrderNotFoundError, InvalidSignatureError, etc.
"""

from .interfaces import IOrderRepository, IPaymentGateway
from .models import (
    CallbackStatus,
    GatewayOrder,
    MembershipState,
    MembershipStatus,
    Order,
    OrderStatus,
    PurchaseRecord,
    ReconciliationResult,
)
from .exceptions import (
    GatewayError,
    GatewayTimeoutError,
    InvalidOrderTransitionError,
    InvalidSignatureError,
    OrderNotFoundError,
)
from .gateway import RazorpayGateway, compute_signature, verify_signature
from .ledger import OrderLedger
from .reconciler import PaymentReconciler

__all__ = [
    # Interfaces
    "IOrderRepository",
    "IPaymentGateway",
    # Models
    "CallbackStatus",
    "GatewayOrder",
    "MembershipState",
    "MembershipStatus",
    "Order",
    "OrderStatus",
    "PurchaseRecord",
    "ReconciliationResult",
    # Exceptions
    "GatewayError",
    "GatewayTimeoutError",
    "InvalidOrderTransitionError",
    "InvalidSignatureError",
    "OrderNotFoundError",
    # Implementations
    "RazorpayGateway",
    "compute_signature",
    "verify_signature",
    "OrderLedger",
    "PaymentReconciler",
]
