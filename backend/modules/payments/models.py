"""
Payments module data models.

Amounts are integers in the currency's minor unit (paise for INR) from
order creation through to the gateway request and the membership record.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models import CamelModel
from modules.referrals.models import PlanType


class OrderStatus(str, Enum):
    """Order lifecycle. `pending` moves once to a terminal state."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


TERMINAL_STATUSES = frozenset({OrderStatus.COMPLETED, OrderStatus.FAILED})


class CallbackStatus(str, Enum):
    """Statuses a payment callback may request."""

    COMPLETED = "completed"
    FAILED = "failed"


class MembershipStatus(str, Enum):
    NONE = "none"
    ACTIVE = "active"


class Order(BaseModel):
    """A purchase order, stored in the `orders` table."""

    id: str
    user_id: str
    plan_type: PlanType
    amount: int = Field(..., ge=0, description="Amount in paise")
    currency: str
    status: OrderStatus
    referral_code: Optional[str] = None
    external_order_id: Optional[str] = Field(
        None, description="Gateway order ID; null until the gateway call returns"
    )
    payment_id: Optional[str] = None
    signature: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class PurchaseRecord(CamelModel):
    """
    Denormalized history row written once per completed order.

    Stored in `user_orders`, unique on `order_id`.
    """

    id: Optional[str] = None
    user_id: str
    order_id: str
    external_order_id: str
    payment_id: str
    plan_type: PlanType
    amount: int
    currency: str
    status: OrderStatus = OrderStatus.COMPLETED
    payment_date: datetime
    created_at: datetime

    model_config = {"extra": "ignore"}


class MembershipState(BaseModel):
    """Membership fields embedded in the user's profile row."""

    membership_status: MembershipStatus = MembershipStatus.NONE
    plan_type: Optional[PlanType] = None
    amount_paid: Optional[int] = None
    currency: Optional[str] = None
    subscription_start_date: Optional[datetime] = None
    last_payment_date: Optional[datetime] = None
    external_order_id: Optional[str] = None


class GatewayOrder(BaseModel):
    """Order as returned by the payment gateway."""

    id: str
    amount: int
    currency: str
    receipt: Optional[str] = None
    status: Optional[str] = None

    model_config = {"extra": "ignore"}


class ReconciliationResult(BaseModel):
    """Outcome of applying a payment callback."""

    order: Order
    status: OrderStatus
    already_processed: bool = Field(
        False, description="True when this callback repeated an applied transition"
    )


# -----------------------------------------------------------------------------
# API request/response bodies
# -----------------------------------------------------------------------------


class CreateOrderRequest(CamelModel):
    plan_type: PlanType
    referral_code: Optional[str] = None


class CreateOrderResponse(CamelModel):
    order_id: str = Field(..., description="Gateway order ID, used for checkout")
    amount: int
    currency: str
    gateway_key: str = Field(..., description="Public gateway key ID for checkout")


class UpdateOrderRequest(CamelModel):
    payment_id: Optional[str] = None
    status: CallbackStatus
    signature: Optional[str] = None


class UpdateOrderResponse(CamelModel):
    message: str
    status: OrderStatus
    already_processed: bool = False
