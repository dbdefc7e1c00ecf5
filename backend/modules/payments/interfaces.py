"""
Payments module interfaces.

The ledger and reconciler depend on these protocols, so the Supabase
repository and the Razorpay client can be swapped for in-memory fakes.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import GatewayOrder, MembershipState, Order, OrderStatus, PurchaseRecord


@runtime_checkable
class IPaymentGateway(Protocol):
    """Remote payment gateway."""

    @property
    def key_id(self) -> str:
        """Public key ID handed to the checkout widget."""
        ...

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[dict[str, str]] = None,
    ) -> GatewayOrder:
        """
        Create a remote order.

        Args:
            amount: Amount in minor currency units
            currency: ISO currency code
            receipt: Our order ID
            notes: Free-form metadata stored with the remote order

        Raises:
            GatewayError: On a non-success response
            GatewayTimeoutError: If the gateway does not answer in time
        """
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """Persistence for orders, purchase history and membership."""

    def create_order(self, data: dict[str, Any]) -> Order:
        """Insert an order row and return it with its generated ID."""
        ...

    def get_order(self, order_id: str) -> Optional[Order]:
        ...

    def find_by_external_id(self, external_order_id: str, user_id: str) -> Optional[Order]:
        """Find the caller's order by gateway order ID."""
        ...

    def attach_external_id(self, order_id: str, external_order_id: str) -> Order:
        ...

    def transition_status(
        self,
        order_id: str,
        expected: OrderStatus,
        data: dict[str, Any],
    ) -> Optional[Order]:
        """
        Compare-and-swap update of an order.

        Applies `data` only if the stored status still equals `expected`.

        Returns:
            The updated order, or None if the status had already changed
        """
        ...

    def upsert_purchase_record(self, record: PurchaseRecord) -> PurchaseRecord:
        """Write the history row for an order, keyed by order ID so repeats never duplicate it."""
        ...

    def list_purchase_records(self, user_id: str) -> list[PurchaseRecord]:
        """History rows for a user, newest first."""
        ...

    def upsert_membership(self, user_id: str, membership: MembershipState) -> None:
        ...
