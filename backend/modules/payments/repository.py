"""
Order repository for database access.

Encapsulates all Supabase queries and data mapping for payment tables:
- orders
- user_orders (purchase history)
- users (membership fields only)

Note: This repository does NOT perform authorization checks beyond the
user filter in find_by_external_id. The services own the business rules.
"""

from typing import Any, Optional

from shared.repository import BaseRepository, utc_now_iso

from .interfaces import IOrderRepository
from .models import MembershipState, Order, OrderStatus, PurchaseRecord


class OrderRepository(BaseRepository[Order], IOrderRepository):
    """Supabase-backed order, purchase history and membership storage."""

    # -------------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------------

    def create_order(self, data: dict[str, Any]) -> Order:
        result = self._db.table("orders").insert(data).execute()
        return Order(**result.data[0])

    def get_order(self, order_id: str) -> Optional[Order]:
        result = self._db.table("orders").select("*").eq("id", order_id).execute()
        if not result.data:
            return None
        return Order(**result.data[0])

    def find_by_external_id(self, external_order_id: str, user_id: str) -> Optional[Order]:
        result = (
            self._db.table("orders")
            .select("*")
            .eq("external_order_id", external_order_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return Order(**result.data[0])

    def attach_external_id(self, order_id: str, external_order_id: str) -> Order:
        result = (
            self._db.table("orders")
            .update({"external_order_id": external_order_id, "updated_at": utc_now_iso()})
            .eq("id", order_id)
            .execute()
        )
        return Order(**result.data[0])

    def transition_status(
        self,
        order_id: str,
        expected: OrderStatus,
        data: dict[str, Any],
    ) -> Optional[Order]:
        # The status filter makes this a conditional update: a concurrent
        # callback that already moved the order matches zero rows.
        result = (
            self._db.table("orders")
            .update(data)
            .eq("id", order_id)
            .eq("status", expected.value)
            .execute()
        )
        if not result.data:
            return None
        return Order(**result.data[0])

    # -------------------------------------------------------------------------
    # Purchase history
    # -------------------------------------------------------------------------

    def upsert_purchase_record(self, record: PurchaseRecord) -> PurchaseRecord:
        row = record.model_dump(mode="json", exclude={"id"}, exclude_none=True)
        result = (
            self._db.table("user_orders")
            .upsert(row, on_conflict="order_id", ignore_duplicates=True)
            .execute()
        )
        if result.data:
            return PurchaseRecord(**result.data[0])
        # Row already existed; return the stored copy.
        existing = (
            self._db.table("user_orders")
            .select("*")
            .eq("order_id", record.order_id)
            .execute()
        )
        return PurchaseRecord(**existing.data[0])

    def list_purchase_records(self, user_id: str) -> list[PurchaseRecord]:
        result = (
            self._db.table("user_orders")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [PurchaseRecord(**row) for row in result.data]

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def upsert_membership(self, user_id: str, membership: MembershipState) -> None:
        row = membership.model_dump(mode="json")
        row["id"] = user_id
        row["updated_at"] = utc_now_iso()
        self._db.table("users").upsert(row, on_conflict="id").execute()
