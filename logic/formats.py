"""
logic/formats.py - display helpers (IDR, month keys, volume)
──────────────────────────────────────────────────────────────
* month and seller selector values used by the order forms
* IDR currency / volume formatting for tables and exports
* product dimension calculator (cm → m³)
"""
import math
from datetime import date
from typing import Iterator, List, Optional, Sequence, Tuple

from .models import Seller, validate_month

CM3_PER_M3 = 1_000_000
VOLUME_DECIMALS = 6


# ─────────────────────────────────────
# 1. Month keys
# ─────────────────────────────────────
def _parse_month(key: str) -> date:
    validate_month(key)
    year, month = key.split("-")
    return date(int(year), int(month), 1)


def format_month(key: str, short: bool = False) -> str:
    """'2024-01' → 'January 2024' (short: 'Jan 24')."""
    d = _parse_month(key)
    return d.strftime("%b %y") if short else d.strftime("%B %Y")


def month_options(start: str, end: str) -> Iterator[Tuple[str, str]]:
    """
    (value, label) pairs for every month from start to end inclusive.

    Args:
        start: first month key (YYYY-MM)
        end: last month key (YYYY-MM)
    """
    current = _parse_month(start)
    last = _parse_month(end)
    while current <= last:
        key = current.strftime("%Y-%m")
        yield key, format_month(key)
        if current.month == 12:
            current = current.replace(year=current.year + 1, month=1)
        else:
            current = current.replace(month=current.month + 1)


MONTH_OPTIONS: List[Tuple[str, str]] = list(month_options("2024-01", "2025-12"))


# ─────────────────────────────────────
# 2. Amounts / volume
# ─────────────────────────────────────
def format_idr(amount: float) -> str:
    """Rupiah without decimals, '.' as thousands separator: 'Rp 33.000'."""
    rounded = int(abs(amount) + 0.5)
    body = f"Rp {rounded:,}".replace(",", ".")
    return f"-{body}" if amount < 0 and rounded else body


def format_volume(volume: float) -> str:
    return f"{volume:.{VOLUME_DECIMALS}f} m³"


def volume_from_dimensions(length_cm: float, width_cm: float, height_cm: float) -> float:
    """
    Product volume in m³ from its dimensions in cm.

    Raises:
        ValueError: any dimension is negative or not finite
    """
    if not all(math.isfinite(d) for d in (length_cm, width_cm, height_cm)):
        raise ValueError("dimensions must be finite numbers")
    if min(length_cm, width_cm, height_cm) < 0:
        raise ValueError("dimensions must not be negative")
    return (length_cm * width_cm * height_cm) / CM3_PER_M3


# ─────────────────────────────────────
# 3. Seller selector
# ─────────────────────────────────────
def seller_choices(sellers: Sequence[Seller], current: Optional[str] = None) -> Tuple[List[str], int]:
    """
    Seller ids for a selectbox plus the index to preselect.

    An order whose seller was deleted keeps its dangling id as the last
    choice and preselects it, so editing never reassigns it silently.
    """
    ids = [s.id for s in sellers]
    if current is None:
        return ids, 0
    if current not in ids:
        ids.append(current)
    return ids, ids.index(current)
