"""
Order ledger.

Creates purchase orders and links them to the gateway's remote order.
The local order is written first so a failed gateway call still leaves an
auditable pending order behind. The two writes are sequential, not atomic:
an order with no external_order_id is the defined partial-failure state.
Repository calls are blocking Supabase requests and run in worker threads.
"""

import asyncio
import logging
from datetime import date
from typing import Callable, Optional

from shared.repository import utc_now_iso
from modules.referrals import (
    PlanType,
    ReferralResolution,
    price_for_plan,
    resolve_referral,
)

from .exceptions import GatewayError, GatewayTimeoutError
from .interfaces import IOrderRepository, IPaymentGateway
from .models import Order, OrderStatus, PurchaseRecord

logger = logging.getLogger(__name__)


class OrderLedger:
    """Creates orders and attaches gateway order IDs."""

    def __init__(
        self,
        repository: IOrderRepository,
        gateway: IPaymentGateway,
        currency: str = "INR",
        today: Callable[[], date] = date.today,
    ):
        self._repository = repository
        self._gateway = gateway
        self._currency = currency
        self._today = today

    @property
    def gateway_key(self) -> str:
        return self._gateway.key_id

    def verify_referral(self, code: str, plan_type: PlanType) -> ReferralResolution:
        """Resolve a referral code against today's date."""
        return resolve_referral(code, plan_type, today=self._today())

    async def create_order(
        self,
        user_id: str,
        plan_type: PlanType,
        referral_code: Optional[str] = None,
    ) -> Order:
        """
        Create a pending order and its remote gateway order.

        An invalid or expired referral code is not an error; the order is
        simply charged at the base price.

        Raises:
            GatewayError: The gateway refused the order; the local order
                stays pending with no external ID
            GatewayTimeoutError: The gateway did not answer in time
        """
        plan_type = PlanType(plan_type)
        amount, resolution = price_for_plan(plan_type, referral_code, today=self._today())
        applied_code = referral_code if resolution is not None and resolution.valid else None
        if referral_code and applied_code is None:
            logger.info(
                "Referral code %r not applied for user %s (%s); charging base price",
                referral_code,
                user_id,
                resolution.reason.value if resolution and resolution.reason else "unknown",
            )

        now = utc_now_iso()
        order = await asyncio.to_thread(self._repository.create_order, {
            "user_id": user_id,
            "plan_type": plan_type.value,
            "amount": amount,
            "currency": self._currency,
            "status": OrderStatus.PENDING.value,
            "referral_code": applied_code,
            "created_at": now,
            "updated_at": now,
        })

        try:
            remote = await self._gateway.create_order(
                amount=order.amount,
                currency=order.currency,
                receipt=order.id,
                notes={
                    "planType": plan_type.value,
                    "userId": user_id,
                    "orderId": order.id,
                    "referralCode": applied_code,
                },
            )
        except (GatewayError, GatewayTimeoutError):
            logger.error("Gateway order creation failed; order %s left pending", order.id)
            raise

        return await self.attach_external_id(order.id, remote.id)

    async def attach_external_id(self, order_id: str, external_order_id: str) -> Order:
        """Record the gateway's order ID on a local order."""
        order = await asyncio.to_thread(
            self._repository.attach_external_id, order_id, external_order_id
        )
        logger.info("Order %s linked to gateway order %s", order_id, external_order_id)
        return order

    async def list_history(self, user_id: str) -> list[PurchaseRecord]:
        """A user's completed purchases, newest first."""
        return await asyncio.to_thread(self._repository.list_purchase_records, user_id)
