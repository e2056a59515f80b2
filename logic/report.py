"""
logic/report.py - monthly / per-seller revenue aggregation
────────────────────────────────────────────────────────────
Pure functions over the full seller and order collections.
Nothing is cached: every call recomputes from scratch.

Revenue of one order = volume charge + order charge
    volume charge = volume × rate_per_cubic_meter
    order charge  = qty(≤3) × rate_under_three + qty(>3) × rate_over_three

Orders whose seller no longer exists still count toward order totals
and volume, but never toward any amount or the seller count.
"""
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

import pandas as pd

from .models import MonthlyStats, Order, Seller, SellerStats

logger = logging.getLogger(__name__)

UNKNOWN_SELLER = "Unknown"

MONTHLY_COLUMNS = [
    "month", "total_orders", "total_sellers",
    "total_order_amount", "total_volume_amount", "total_amount", "total_volume",
]
SELLER_COLUMNS = ["seller_id", "seller_name", "total_amount", "percentage"]


def _index_sellers(sellers: Iterable[Seller]) -> Dict[str, Seller]:
    return {s.id: s for s in sellers}


def order_charges(order: Order, seller: Seller) -> Tuple[float, float]:
    """
    Charges of one order at the seller's rates.

    Returns:
        (volume charge, order charge)
    """
    volume_charge = order.volume * seller.rate_per_cubic_meter
    order_charge = (
        order.quantity_under_three * seller.rate_under_three
        + order.quantity_over_three * seller.rate_over_three
    )
    return volume_charge, order_charge


# ─────────────────────────────────────
# 1. Monthly statistics
# ─────────────────────────────────────
def compute_monthly_stats(sellers: List[Seller], orders: List[Order]) -> List[MonthlyStats]:
    """
    One row per distinct order month, newest month first.

    Args:
        sellers: every known seller
        orders: every recorded order (may reference deleted sellers)

    Returns:
        MonthlyStats list sorted by month descending
    """
    by_id = _index_sellers(sellers)
    monthly: Dict[str, MonthlyStats] = {}
    active: Dict[str, Set[str]] = {}

    for order in orders:
        stat = monthly.get(order.month)
        if stat is None:
            stat = monthly[order.month] = MonthlyStats(month=order.month)
            active[order.month] = set()

        stat.total_orders += order.total_quantity
        stat.total_volume += order.volume

        seller = by_id.get(order.seller_id)
        if seller is None:
            continue

        volume_charge, order_charge = order_charges(order, seller)
        stat.total_volume_amount += volume_charge
        stat.total_order_amount += order_charge
        stat.total_amount += volume_charge + order_charge
        active[order.month].add(seller.id)

    for month, seller_ids in active.items():
        monthly[month].total_sellers = len(seller_ids)

    result = sorted(monthly.values(), key=lambda s: s.month, reverse=True)
    logger.debug(f"monthly stats: {len(orders)} orders -> {len(result)} months")
    return result


# ─────────────────────────────────────
# 2. Per-seller statistics
# ─────────────────────────────────────
def compute_seller_stats(sellers: List[Seller], orders: List[Order]) -> List[SellerStats]:
    """
    Revenue per seller across all months, largest first.

    Only sellers that resolve from at least one order get a row.
    When the grand total is zero every percentage is reported as 0.0.
    """
    by_id = _index_sellers(sellers)
    amounts: Dict[str, float] = {}
    grand_total = 0.0

    for order in orders:
        seller = by_id.get(order.seller_id)
        if seller is None:
            continue
        volume_charge, order_charge = order_charges(order, seller)
        amount = volume_charge + order_charge
        amounts[seller.id] = amounts.get(seller.id, 0.0) + amount
        grand_total += amount

    result = []
    for seller_id, amount in amounts.items():
        seller: Optional[Seller] = by_id.get(seller_id)
        result.append(SellerStats(
            seller_id=seller_id,
            seller_name=seller.name if seller else UNKNOWN_SELLER,
            total_amount=amount,
            percentage=(amount / grand_total * 100) if grand_total else 0.0,
        ))

    result.sort(key=lambda s: s.total_amount, reverse=True)
    logger.debug(f"seller stats: {len(result)} sellers, grand total {grand_total:,.2f}")
    return result


# ─────────────────────────────────────
# 3. DataFrame views (tables / charts / CSV)
# ─────────────────────────────────────
def monthly_stats_frame(stats: List[MonthlyStats]) -> pd.DataFrame:
    return pd.DataFrame([s.to_dict() for s in stats], columns=MONTHLY_COLUMNS)


def seller_stats_frame(stats: List[SellerStats]) -> pd.DataFrame:
    return pd.DataFrame([s.to_dict() for s in stats], columns=SELLER_COLUMNS)
