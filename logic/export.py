"""
logic/export.py - CSV export of sellers / orders / reports
────────────────────────────────────────────────────────────
Records are flattened by dotted field paths ("seller.name") and written
with pandas. Every value is quoted and embedded quotes are doubled, so
names containing commas or quotes survive the round trip.
"""
import csv
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .formats import format_month
from .models import Order, Seller
from .report import UNKNOWN_SELLER

SELLER_EXPORT_HEADERS = ["Name", "Rate per m³", "Rate (≤3 products)", "Rate (>3 products)"]
SELLER_EXPORT_FIELDS = ["name", "rate_per_cubic_meter", "rate_under_three", "rate_over_three"]

ORDER_EXPORT_HEADERS = ["Date", "Seller", "Month", "≤3 Products", ">3 Products", "Volume (m³)"]
ORDER_EXPORT_FIELDS = ["date", "seller_name", "month", "quantity_under_three", "quantity_over_three", "volume"]

MONTHLY_EXPORT_HEADERS = [
    "Month", "Orders", "Sellers", "Order Revenue", "Volume Revenue", "Total Revenue", "Total Volume",
]
MONTHLY_EXPORT_FIELDS = [
    "month", "total_orders", "total_sellers",
    "total_order_amount", "total_volume_amount", "total_amount", "total_volume",
]


def resolve_field(record: Any, path: str) -> Any:
    """Walk a dotted path through dicts / attributes; missing → None."""
    value = record
    for key in path.split("."):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(key)
        else:
            value = getattr(value, key, None)
    return value


def to_csv(records: Sequence[Any], headers: List[str], fields: List[str]) -> str:
    """
    CSV text with one header row and one row per record.

    Args:
        records: dicts or objects
        headers: header labels, one per field
        fields: dotted field paths, one per column

    Raises:
        ValueError: headers / fields length mismatch
    """
    if len(headers) != len(fields):
        raise ValueError(f"{len(headers)} headers for {len(fields)} fields")

    rows = []
    for record in records:
        row = []
        for path in fields:
            value = resolve_field(record, path)
            row.append("" if value is None else str(value))
        rows.append(row)

    df = pd.DataFrame(rows, columns=headers)
    return df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")


def export_filename(base: str, today: Optional[date] = None) -> str:
    """'orders' → 'orders_2024-05-31.csv'."""
    today = today or date.today()
    return f"{base}_{today.isoformat()}.csv"


# ─────────────────────────────────────
# Row builders
# ─────────────────────────────────────
def seller_export_rows(sellers: List[Seller]) -> List[Dict[str, Any]]:
    return [s.to_dict() for s in sellers]


def order_export_rows(sellers: List[Seller], orders: List[Order]) -> List[Dict[str, Any]]:
    """Orders with seller name, readable month and creation date resolved."""
    names = {s.id: s.name for s in sellers}
    rows = []
    for order in orders:
        row = order.to_dict()
        row["date"] = order.created_at.date().isoformat()
        row["seller_name"] = names.get(order.seller_id, UNKNOWN_SELLER)
        row["month"] = format_month(order.month)
        rows.append(row)
    return rows
