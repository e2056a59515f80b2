"""
logic/models.py - seller / order records and derived report rows
─────────────────────────────────────────────────────────────────
Plain dataclasses shared by the store, the report aggregator,
the API layer and the Streamlit pages.
"""
import math
import re
import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Dict, Any

MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")

SELLER_RATE_FIELDS = ("rate_per_cubic_meter", "rate_under_three", "rate_over_three")
ORDER_FIELDS = ("seller_id", "month", "quantity_under_three", "quantity_over_three", "volume")


def new_id() -> str:
    return uuid.uuid4().hex


# ─────────────────────────────────────
# 1. Records
# ─────────────────────────────────────
@dataclass
class Seller:
    """Seller billed at three independent rates."""
    id: str
    name: str
    rate_per_cubic_meter: float = 0.0
    rate_under_three: float = 0.0
    rate_over_three: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Order:
    """One month of shipments for a seller (two order tiers + volume in m³)."""
    id: str
    seller_id: str
    month: str
    quantity_under_three: int = 0
    quantity_over_three: int = 0
    volume: float = 0.0
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def total_quantity(self) -> int:
        return self.quantity_under_three + self.quantity_over_three

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ─────────────────────────────────────
# 2. Derived rows (recomputed on every report)
# ─────────────────────────────────────
@dataclass
class MonthlyStats:
    month: str
    total_orders: int = 0
    total_sellers: int = 0
    total_order_amount: float = 0.0
    total_volume_amount: float = 0.0
    total_amount: float = 0.0
    total_volume: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SellerStats:
    seller_id: str
    seller_name: str
    total_amount: float = 0.0
    percentage: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ─────────────────────────────────────
# 3. Validation
# ─────────────────────────────────────
def validate_month(month: str) -> str:
    if not isinstance(month, str) or not MONTH_RE.match(month):
        raise ValueError(f"month must be YYYY-MM, got {month!r}")
    return month


def validate_seller(seller: Seller) -> Seller:
    """
    Check a seller before it goes into the store.

    Raises:
        ValueError: empty name, negative or non-finite rate
    """
    if not seller.name or not seller.name.strip():
        raise ValueError("seller name is required")
    for name in SELLER_RATE_FIELDS:
        if not math.isfinite(getattr(seller, name)):
            raise ValueError(f"{name} must be a finite number")
        if getattr(seller, name) < 0:
            raise ValueError(f"{name} must not be negative")
    return seller


def validate_order(order: Order) -> Order:
    """
    Check an order before it goes into the store.

    The aggregator never calls this; it accepts whatever the store holds.

    Raises:
        ValueError: missing seller, bad month, negative numbers,
            non-finite volume or both quantities zero
    """
    if not order.seller_id:
        raise ValueError("seller_id is required")
    validate_month(order.month)
    if order.quantity_under_three < 0 or order.quantity_over_three < 0:
        raise ValueError("quantities must not be negative")
    if not math.isfinite(order.volume):
        raise ValueError("volume must be a finite number")
    if order.volume < 0:
        raise ValueError("volume must not be negative")
    if order.total_quantity <= 0:
        raise ValueError("at least one of quantity_under_three / quantity_over_three must be > 0")
    return order
