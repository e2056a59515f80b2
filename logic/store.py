"""
logic/store.py - in-memory seller / order store
─────────────────────────────────────────────────
Holds the current record set for one session (Streamlit) or one
process (API). Nothing is written to disk.

Deleting a seller also deletes every order that references it.
"""
import logging
import threading
from dataclasses import replace
from typing import List, Optional, Tuple

from .models import (
    ORDER_FIELDS,
    SELLER_RATE_FIELDS,
    Order,
    Seller,
    new_id,
    validate_order,
    validate_seller,
)

logger = logging.getLogger(__name__)


class RecordNotFoundError(KeyError):
    """Unknown seller / order id."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} '{record_id}' not found")

    def __str__(self) -> str:
        return self.args[0]


class RecordStore:
    """Sellers and orders in insertion order, guarded by one lock."""

    def __init__(self):
        self._lock = threading.RLock()
        self._sellers: List[Seller] = []
        self._orders: List[Order] = []

    # ─────────────────────────────────────
    # Snapshot
    # ─────────────────────────────────────
    def snapshot(self) -> Tuple[List[Seller], List[Order]]:
        """
        Copies of both collections taken under the lock.

        Reports must be computed from one snapshot so that a concurrent
        mutation is either fully visible or not at all.
        """
        with self._lock:
            return list(self._sellers), list(self._orders)

    def clear(self) -> None:
        with self._lock:
            self._sellers.clear()
            self._orders.clear()
        logger.info("record store cleared")

    # ─────────────────────────────────────
    # Sellers
    # ─────────────────────────────────────
    def list_sellers(self) -> List[Seller]:
        with self._lock:
            return list(self._sellers)

    def get_seller(self, seller_id: str) -> Seller:
        with self._lock:
            return self._sellers[self._seller_index(seller_id)]

    def has_seller(self, seller_id: str) -> bool:
        with self._lock:
            return any(s.id == seller_id for s in self._sellers)

    def create_seller(
        self,
        name: str,
        rate_per_cubic_meter: float = 0.0,
        rate_under_three: float = 0.0,
        rate_over_three: float = 0.0,
        seller_id: Optional[str] = None,
    ) -> Seller:
        """
        Add a seller.

        Args:
            name: display name
            rate_per_cubic_meter: charge per m³ shipped
            rate_under_three: charge per order with 3 or fewer products
            rate_over_three: charge per order with more than 3 products
            seller_id: explicit id (generated when omitted)

        Raises:
            ValueError: invalid fields or duplicate id
        """
        seller = validate_seller(Seller(
            id=seller_id or new_id(),
            name=name.strip(),
            rate_per_cubic_meter=rate_per_cubic_meter,
            rate_under_three=rate_under_three,
            rate_over_three=rate_over_three,
        ))
        with self._lock:
            if any(s.id == seller.id for s in self._sellers):
                raise ValueError(f"seller id '{seller.id}' already exists")
            self._sellers.append(seller)
        logger.info(f"seller created: {seller.name} ({seller.id})")
        return seller

    def update_seller(self, seller_id: str, **changes) -> Seller:
        """Change name and/or rates. The id never changes."""
        unknown = set(changes) - {"name", *SELLER_RATE_FIELDS}
        if unknown:
            raise ValueError(f"cannot update seller fields: {', '.join(sorted(unknown))}")
        if "name" in changes and changes["name"] is not None:
            changes["name"] = changes["name"].strip()
        changes = {k: v for k, v in changes.items() if v is not None}

        with self._lock:
            idx = self._seller_index(seller_id)
            updated = validate_seller(replace(self._sellers[idx], **changes))
            self._sellers[idx] = updated
        logger.info(f"seller updated: {updated.name} ({seller_id})")
        return updated

    def delete_seller(self, seller_id: str) -> int:
        """
        Remove a seller and all of its orders.

        Returns:
            number of orders removed with the seller
        """
        with self._lock:
            idx = self._seller_index(seller_id)
            seller = self._sellers.pop(idx)
            before = len(self._orders)
            self._orders = [o for o in self._orders if o.seller_id != seller_id]
            removed = before - len(self._orders)
        logger.info(f"seller deleted: {seller.name} ({seller_id}), {removed} orders removed")
        return removed

    # ─────────────────────────────────────
    # Orders
    # ─────────────────────────────────────
    def list_orders(self, seller_id: Optional[str] = None, month: Optional[str] = None) -> List[Order]:
        with self._lock:
            orders = list(self._orders)
        if seller_id is not None:
            orders = [o for o in orders if o.seller_id == seller_id]
        if month is not None:
            orders = [o for o in orders if o.month == month]
        return orders

    def get_order(self, order_id: str) -> Order:
        with self._lock:
            return self._orders[self._order_index(order_id)]

    def create_order(
        self,
        seller_id: str,
        month: str,
        quantity_under_three: int = 0,
        quantity_over_three: int = 0,
        volume: float = 0.0,
        order_id: Optional[str] = None,
    ) -> Order:
        """
        Record one month of orders for a seller.

        A seller_id that is not in the store is accepted; the order is kept
        as an orphan and earns no revenue in reports.

        Raises:
            ValueError: invalid fields (see validate_order) or duplicate id
        """
        order = validate_order(Order(
            id=order_id or new_id(),
            seller_id=seller_id,
            month=month,
            quantity_under_three=quantity_under_three,
            quantity_over_three=quantity_over_three,
            volume=volume,
        ))
        with self._lock:
            if any(o.id == order.id for o in self._orders):
                raise ValueError(f"order id '{order.id}' already exists")
            self._warn_orphan(order)
            self._orders.append(order)
        logger.info(f"order created: {order.id} seller={seller_id} month={month}")
        return order

    def update_order(self, order_id: str, **changes) -> Order:
        """Change any order field except its id and creation time."""
        unknown = set(changes) - set(ORDER_FIELDS)
        if unknown:
            raise ValueError(f"cannot update order fields: {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in changes.items() if v is not None}

        with self._lock:
            idx = self._order_index(order_id)
            updated = validate_order(replace(self._orders[idx], **changes))
            self._warn_orphan(updated)
            self._orders[idx] = updated
        logger.info(f"order updated: {order_id}")
        return updated

    def delete_order(self, order_id: str) -> Order:
        with self._lock:
            order = self._orders.pop(self._order_index(order_id))
        logger.info(f"order deleted: {order_id}")
        return order

    # ─────────────────────────────────────
    # Internals (caller holds the lock)
    # ─────────────────────────────────────
    def _seller_index(self, seller_id: str) -> int:
        for idx, seller in enumerate(self._sellers):
            if seller.id == seller_id:
                return idx
        raise RecordNotFoundError("seller", seller_id)

    def _order_index(self, order_id: str) -> int:
        for idx, order in enumerate(self._orders):
            if order.id == order_id:
                return idx
        raise RecordNotFoundError("order", order_id)

    def _warn_orphan(self, order: Order) -> None:
        if not any(s.id == order.seller_id for s in self._sellers):
            logger.warning(f"order {order.id} references unknown seller '{order.seller_id}'")


# singleton
_store: Optional[RecordStore] = None


def get_store() -> RecordStore:
    """Process-wide store used by the API."""
    global _store
    if _store is None:
        _store = RecordStore()
    return _store
