"""
Pytest fixtures for payments module tests.

In-memory stand-ins for the order repository and the payment gateway, so
ledger and reconciler behavior is tested without Supabase or Razorpay.
"""

import itertools
from datetime import date
from typing import Any, Optional

import pytest

from modules.payments.exceptions import GatewayError
from modules.payments.interfaces import IOrderRepository, IPaymentGateway
from modules.payments.ledger import OrderLedger
from modules.payments.models import (
    GatewayOrder,
    MembershipState,
    Order,
    OrderStatus,
    PurchaseRecord,
)
from modules.payments.reconciler import PaymentReconciler

from tests.conftest import TEST_GATEWAY_SECRET

# A day on which the bundled referral codes are still valid
REFERRAL_DAY = date(2026, 4, 1)


class InMemoryOrderRepository(IOrderRepository):
    """Dict-backed order repository with the same conditional-update rule."""

    def __init__(self):
        self.orders: dict[str, Order] = {}
        self.purchase_records: dict[str, PurchaseRecord] = {}
        self.memberships: dict[str, MembershipState] = {}
        self.purchase_writes = 0
        self.membership_writes = 0
        self._ids = itertools.count(1)

    def create_order(self, data: dict[str, Any]) -> Order:
        order = Order(id=f"ord-{next(self._ids)}", **data)
        self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.orders.get(order_id)

    def find_by_external_id(self, external_order_id: str, user_id: str) -> Optional[Order]:
        for order in self.orders.values():
            if order.external_order_id == external_order_id and order.user_id == user_id:
                return order
        return None

    def attach_external_id(self, order_id: str, external_order_id: str) -> Order:
        order = self.orders[order_id].model_copy(update={"external_order_id": external_order_id})
        self.orders[order_id] = order
        return order

    def transition_status(
        self,
        order_id: str,
        expected: OrderStatus,
        data: dict[str, Any],
    ) -> Optional[Order]:
        current = self.orders.get(order_id)
        if current is None or current.status != expected:
            return None
        updated = Order(**{**current.model_dump(), **data})
        self.orders[order_id] = updated
        return updated

    def upsert_purchase_record(self, record: PurchaseRecord) -> PurchaseRecord:
        self.purchase_writes += 1
        stored = self.purchase_records.setdefault(
            record.order_id, record.model_copy(update={"id": f"uo-{record.order_id}"})
        )
        return stored

    def list_purchase_records(self, user_id: str) -> list[PurchaseRecord]:
        records = [r for r in self.purchase_records.values() if r.user_id == user_id]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def upsert_membership(self, user_id: str, membership: MembershipState) -> None:
        self.membership_writes += 1
        self.memberships[user_id] = membership


class FakeGateway(IPaymentGateway):
    """Gateway that hands out sequential order IDs, or fails on demand."""

    def __init__(self, key_id: str = "rzp_test_key"):
        self._key_id = key_id
        self.requests: list[dict[str, Any]] = []
        self.error: Optional[Exception] = None
        self._ids = itertools.count(1)

    @property
    def key_id(self) -> str:
        return self._key_id

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[dict[str, str]] = None,
    ) -> GatewayOrder:
        self.requests.append({"amount": amount, "currency": currency, "receipt": receipt, "notes": notes})
        if self.error is not None:
            raise self.error
        return GatewayOrder(id=f"order_ext{next(self._ids)}", amount=amount, currency=currency, receipt=receipt)


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def failing_gateway() -> FakeGateway:
    gateway = FakeGateway()
    gateway.error = GatewayError("The amount must be atleast INR 1.00", status_code=400)
    return gateway


@pytest.fixture
def ledger(order_repository, gateway) -> OrderLedger:
    return OrderLedger(order_repository, gateway, currency="INR", today=lambda: REFERRAL_DAY)


@pytest.fixture
def reconciler(order_repository) -> PaymentReconciler:
    return PaymentReconciler(order_repository, gateway_secret=TEST_GATEWAY_SECRET)
