"""
backend/app/api/reports.py - monthly / seller revenue reports and CSV export
───────────────────────────────────────────────────────────────────────────
Every request recomputes the report from one snapshot of the store.
"""
import io
from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from logic import (
    MONTH_OPTIONS,
    MONTHLY_EXPORT_FIELDS,
    MONTHLY_EXPORT_HEADERS,
    ORDER_EXPORT_FIELDS,
    ORDER_EXPORT_HEADERS,
    SELLER_EXPORT_FIELDS,
    SELLER_EXPORT_HEADERS,
    compute_monthly_stats,
    compute_seller_stats,
    export_filename,
    format_month,
    get_store,
    order_export_rows,
    seller_export_rows,
    to_csv,
)
from backend.app.config import settings
from backend.app.models import NOT_FOUND, MonthListResponse, MonthlyStatsResponse, SellerStatsResponse

router = APIRouter(prefix="/reports", tags=["reports"])

EXPORT_KINDS = ("sellers", "orders", "monthly")


@router.get("/monthly", response_model=List[MonthlyStatsResponse])
async def get_monthly_report():
    """Monthly totals, newest month first."""
    sellers, orders = get_store().snapshot()
    result = []
    for stat in compute_monthly_stats(sellers, orders):
        row = stat.to_dict()
        row["month_label"] = format_month(stat.month)
        result.append(row)
    return result


@router.get("/sellers", response_model=List[SellerStatsResponse])
async def get_seller_report():
    """Revenue per seller across all months, largest first."""
    sellers, orders = get_store().snapshot()
    return [s.to_dict() for s in compute_seller_stats(sellers, orders)]


@router.get("/months", response_model=MonthListResponse)
async def list_months():
    """Months offered by the order entry forms."""
    return {"months": [{"value": v, "label": label} for v, label in MONTH_OPTIONS]}


@router.get("/export/{kind}", responses=NOT_FOUND)
async def export_csv(kind: str):
    """
    CSV download of sellers, order history or the monthly report.

    Args:
        kind: sellers / orders / monthly
    """
    if kind not in EXPORT_KINDS:
        raise HTTPException(status_code=404, detail=f"unknown export '{kind}'")

    sellers, orders = get_store().snapshot()
    if kind == "sellers":
        text = to_csv(seller_export_rows(sellers), SELLER_EXPORT_HEADERS, SELLER_EXPORT_FIELDS)
    elif kind == "orders":
        text = to_csv(order_export_rows(sellers, orders), ORDER_EXPORT_HEADERS, ORDER_EXPORT_FIELDS)
    else:
        text = to_csv(compute_monthly_stats(sellers, orders), MONTHLY_EXPORT_HEADERS, MONTHLY_EXPORT_FIELDS)

    return StreamingResponse(
        io.BytesIO(text.encode(settings.EXPORT_ENCODING)),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={export_filename(kind)}"},
    )
