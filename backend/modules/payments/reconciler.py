"""
Payment callback reconciler.

Applies a checkout callback to local state exactly once:

1. Find the caller's order by gateway order ID.
2. For completions, verify the gateway's HMAC signature.
3. Move the order out of `pending` with a compare-and-swap write.
4. For completions, write the purchase history row and activate the
   membership.

Step 4 is keyed by order ID and replayed whenever the gateway repeats a
completion, so a crash between steps 3 and 4 is repaired by the next
delivery instead of double-appending history.

Repository calls are blocking Supabase requests and run in worker threads.
"""

import asyncio
import logging
from typing import Optional

from shared.exceptions import ValidationError
from shared.repository import utc_now_iso

from .exceptions import (
    InvalidOrderTransitionError,
    InvalidSignatureError,
    OrderNotFoundError,
)
from .gateway import verify_signature
from .interfaces import IOrderRepository
from .models import (
    CallbackStatus,
    MembershipState,
    MembershipStatus,
    Order,
    OrderStatus,
    PurchaseRecord,
    ReconciliationResult,
)

logger = logging.getLogger(__name__)


class PaymentReconciler:
    """Verifies payment callbacks and promotes orders to a terminal state."""

    def __init__(self, repository: IOrderRepository, gateway_secret: str):
        self._repository = repository
        self._gateway_secret = gateway_secret

    async def reconcile(
        self,
        external_order_id: str,
        caller_id: str,
        payment_id: Optional[str],
        status: CallbackStatus | str,
        signature: Optional[str],
    ) -> ReconciliationResult:
        """
        Apply a payment callback.

        Raises:
            ValidationError: Unknown status, or a completion without
                payment ID and signature
            OrderNotFoundError: No such order for this caller
            InvalidSignatureError: Signature mismatch; order left pending
            InvalidOrderTransitionError: Order already in another terminal state
        """
        try:
            requested = OrderStatus(CallbackStatus(status).value)
        except ValueError:
            raise ValidationError(
                f"Unsupported order status: {status}",
                code="INVALID_STATUS",
                details={"allowed": [s.value for s in CallbackStatus]},
            )

        order = await asyncio.to_thread(
            self._repository.find_by_external_id, external_order_id, caller_id
        )
        if order is None:
            logger.warning(
                "Callback for unknown order %s from user %s", external_order_id, caller_id
            )
            raise OrderNotFoundError(external_order_id)

        if requested == OrderStatus.COMPLETED:
            if not payment_id or not signature:
                raise ValidationError(
                    "paymentId and signature are required to complete an order",
                    code="MISSING_PAYMENT_PROOF",
                )
            if not verify_signature(self._gateway_secret, external_order_id, payment_id, signature):
                logger.error("Invalid signature for order %s", external_order_id)
                raise InvalidSignatureError(external_order_id)

        if order.status != OrderStatus.PENDING:
            return await self._replay(order, requested, payment_id)

        update = {
            "status": requested.value,
            "payment_id": payment_id,
            "signature": signature,
            "updated_at": utc_now_iso(),
        }
        updated = await asyncio.to_thread(
            self._repository.transition_status, order.id, OrderStatus.PENDING, update
        )
        if updated is None:
            # Lost the race to a concurrent callback; judge against what won.
            current = await asyncio.to_thread(self._repository.get_order, order.id)
            if current is None:
                raise OrderNotFoundError(external_order_id)
            return await self._replay(current, requested, payment_id)

        logger.info("Order %s marked %s", external_order_id, requested.value)
        if requested == OrderStatus.COMPLETED:
            await self._record_completion(updated)

        return ReconciliationResult(order=updated, status=requested)

    async def _replay(
        self,
        order: Order,
        requested: OrderStatus,
        payment_id: Optional[str],
    ) -> ReconciliationResult:
        """Handle a callback for an order that has already left `pending`."""
        if order.status == requested == OrderStatus.COMPLETED and order.payment_id == payment_id:
            logger.info("Duplicate completion for order %s", order.external_order_id)
            await self._record_completion(order)
            return ReconciliationResult(order=order, status=order.status, already_processed=True)

        if order.status == requested == OrderStatus.FAILED:
            return ReconciliationResult(order=order, status=order.status, already_processed=True)

        raise InvalidOrderTransitionError(
            order.external_order_id or order.id,
            current=order.status.value,
            requested=requested.value,
        )

    async def _record_completion(self, order: Order) -> None:
        """
        Write history and membership for a completed order.

        Every value comes from the stored order (amounts snapshotted at
        creation, dates from the completion write), so replays write
        identical rows.
        """
        completed_at = order.updated_at or order.created_at

        await asyncio.to_thread(
            self._repository.upsert_purchase_record,
            PurchaseRecord(
                user_id=order.user_id,
                order_id=order.id,
                external_order_id=order.external_order_id,
                payment_id=order.payment_id,
                plan_type=order.plan_type,
                amount=order.amount,
                currency=order.currency,
                status=OrderStatus.COMPLETED,
                payment_date=completed_at,
                created_at=completed_at,
            ),
        )

        # Last writer wins: there is no version check on the profile row.
        await asyncio.to_thread(
            self._repository.upsert_membership,
            order.user_id,
            MembershipState(
                membership_status=MembershipStatus.ACTIVE,
                plan_type=order.plan_type,
                amount_paid=order.amount,
                currency=order.currency,
                subscription_start_date=completed_at,
                last_payment_date=completed_at,
                external_order_id=order.external_order_id,
            ),
        )
        logger.info("Membership activated for user %s via order %s", order.user_id, order.id)
