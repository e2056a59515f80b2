"""
backend/app/models/schemas.py - Pydantic schemas
───────────────────────────────────────────────────────
Request validation and response serialization.
All calculation lives in logic/.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


# ─────────────────────────────────────
# Common
# ─────────────────────────────────────
class HealthResponse(BaseModel):
    """Health check."""
    status: str = "ok"
    version: str = "1.0.0"


class ErrorResponse(BaseModel):
    """Body of a 400 / 404 raised through HTTPException."""
    detail: str


NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


# ─────────────────────────────────────
# Sellers
# ─────────────────────────────────────
class SellerCreate(BaseModel):
    """New seller."""
    name: str = Field(..., min_length=1, description="Seller name")
    rate_per_cubic_meter: float = Field(..., ge=0, allow_inf_nan=False, description="Rate per m³ (Rp)")
    rate_under_three: float = Field(..., ge=0, allow_inf_nan=False, description="Rate per order with ≤3 products (Rp)")
    rate_over_three: float = Field(..., ge=0, allow_inf_nan=False, description="Rate per order with >3 products (Rp)")


class SellerUpdate(BaseModel):
    """Seller edit; omitted fields stay unchanged. The id cannot change."""
    name: Optional[str] = Field(default=None, min_length=1)
    rate_per_cubic_meter: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    rate_under_three: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    rate_over_three: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class SellerResponse(BaseModel):
    id: str
    name: str
    rate_per_cubic_meter: float
    rate_under_three: float
    rate_over_three: float


class SellerDeleteResponse(BaseModel):
    status: str = "success"
    deleted: str
    orders_deleted: int = Field(..., description="Orders removed with the seller")


# ─────────────────────────────────────
# Orders
# ─────────────────────────────────────
class OrderCreate(BaseModel):
    """New monthly order record."""
    seller_id: str = Field(..., min_length=1)
    month: str = Field(..., pattern=MONTH_PATTERN, description="YYYY-MM")
    quantity_under_three: int = Field(default=0, ge=0, description="Orders with ≤3 products")
    quantity_over_three: int = Field(default=0, ge=0, description="Orders with >3 products")
    volume: float = Field(..., ge=0, allow_inf_nan=False, description="Shipped volume (m³)")

    @model_validator(mode="after")
    def check_quantity(self):
        if self.quantity_under_three + self.quantity_over_three <= 0:
            raise ValueError("at least one quantity must be greater than 0")
        return self


class OrderUpdate(BaseModel):
    """Order edit; omitted fields stay unchanged."""
    seller_id: Optional[str] = Field(default=None, min_length=1)
    month: Optional[str] = Field(default=None, pattern=MONTH_PATTERN)
    quantity_under_three: Optional[int] = Field(default=None, ge=0)
    quantity_over_three: Optional[int] = Field(default=None, ge=0)
    volume: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class OrderResponse(BaseModel):
    id: str
    seller_id: str
    seller_name: str
    month: str
    quantity_under_three: int
    quantity_over_three: int
    volume: float
    created_at: datetime


# ─────────────────────────────────────
# Reports
# ─────────────────────────────────────
class MonthlyStatsResponse(BaseModel):
    month: str
    month_label: str
    total_orders: int
    total_sellers: int
    total_order_amount: float
    total_volume_amount: float
    total_amount: float
    total_volume: float


class SellerStatsResponse(BaseModel):
    seller_id: str
    seller_name: str
    total_amount: float
    percentage: float


# ─────────────────────────────────────
# Calculators / selectors
# ─────────────────────────────────────
class MonthOption(BaseModel):
    value: str
    label: str


class VolumeRequest(BaseModel):
    """Product dimensions in cm."""
    length_cm: float = Field(..., ge=0, allow_inf_nan=False)
    width_cm: float = Field(..., ge=0, allow_inf_nan=False)
    height_cm: float = Field(..., ge=0, allow_inf_nan=False)


class VolumeResponse(BaseModel):
    cubic_meters: float
    formatted: str


class MonthListResponse(BaseModel):
    months: List[MonthOption]
