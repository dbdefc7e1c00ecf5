"""
Payment API endpoints.

Referral verification, order creation, checkout callbacks and purchase
history. Every route requires a verified bearer credential.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_order_ledger, get_payment_reconciler
from shared.models import CallerIdentity
from modules.referrals import ReferralRejectedError
from modules.referrals.models import VerifyReferralRequest, VerifyReferralResponse

from .ledger import OrderLedger
from .reconciler import PaymentReconciler
from .models import (
    CreateOrderRequest,
    CreateOrderResponse,
    PurchaseRecord,
    UpdateOrderRequest,
    UpdateOrderResponse,
)

router = APIRouter()


@router.post("/verify-referral", response_model=VerifyReferralResponse)
async def verify_referral(
    request: VerifyReferralRequest,
    user: CallerIdentity = Depends(get_current_user),
    ledger: OrderLedger = Depends(get_order_ledger),
) -> VerifyReferralResponse:
    """
    Check a referral code for a plan and quote the discounted price.

    Returns 400 with the rejection reason if the code does not apply.
    """
    resolution = ledger.verify_referral(request.code, request.plan_type)
    if not resolution.valid:
        raise ReferralRejectedError(resolution)

    return VerifyReferralResponse(
        is_valid=True,
        discount_percent=resolution.discount_percent,
        amount_to_pay=resolution.amount_to_pay,
        accepted_plans=resolution.accepted_plans,
        plan_type=resolution.plan_type,
        expiry_date=resolution.expiry_date,
    )


@router.post("/orders", response_model=CreateOrderResponse)
async def create_order(
    request: CreateOrderRequest,
    user: CallerIdentity = Depends(get_current_user),
    ledger: OrderLedger = Depends(get_order_ledger),
) -> CreateOrderResponse:
    """
    Create a payment order for a plan.

    The response carries the gateway order ID and public key the checkout
    widget needs.
    """
    order = await ledger.create_order(user.id, request.plan_type, request.referral_code)
    return CreateOrderResponse(
        order_id=order.external_order_id,
        amount=order.amount,
        currency=order.currency,
        gateway_key=ledger.gateway_key,
    )


@router.put("/orders/{external_order_id}", response_model=UpdateOrderResponse)
async def update_order_status(
    external_order_id: str,
    request: UpdateOrderRequest,
    user: CallerIdentity = Depends(get_current_user),
    reconciler: PaymentReconciler = Depends(get_payment_reconciler),
) -> UpdateOrderResponse:
    """
    Apply the checkout result for one of the caller's orders.

    Completions must carry the gateway's payment ID and signature.
    Repeating a completion is safe and reports `alreadyProcessed`.
    """
    result = await reconciler.reconcile(
        external_order_id=external_order_id,
        caller_id=user.id,
        payment_id=request.payment_id,
        status=request.status,
        signature=request.signature,
    )
    return UpdateOrderResponse(
        message="Order updated successfully",
        status=result.status,
        already_processed=result.already_processed,
    )


@router.get("/user-orders", response_model=list[PurchaseRecord])
async def list_user_orders(
    user: CallerIdentity = Depends(get_current_user),
    ledger: OrderLedger = Depends(get_order_ledger),
) -> list[PurchaseRecord]:
    """The caller's completed purchases, newest first."""
    return await ledger.list_history(user.id)
