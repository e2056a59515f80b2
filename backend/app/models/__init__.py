"""
backend/app/models - Pydantic models
───────────────────────────────────────────
Request / response schemas.
"""

from .schemas import (
    # common
    HealthResponse,
    ErrorResponse,
    NOT_FOUND,
    BAD_REQUEST,
    # sellers
    SellerCreate,
    SellerUpdate,
    SellerResponse,
    SellerDeleteResponse,
    # orders
    OrderCreate,
    OrderUpdate,
    OrderResponse,
    # reports
    MonthlyStatsResponse,
    SellerStatsResponse,
    # calculators
    MonthOption,
    MonthListResponse,
    VolumeRequest,
    VolumeResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "NOT_FOUND",
    "BAD_REQUEST",
    "SellerCreate",
    "SellerUpdate",
    "SellerResponse",
    "SellerDeleteResponse",
    "OrderCreate",
    "OrderUpdate",
    "OrderResponse",
    "MonthlyStatsResponse",
    "SellerStatsResponse",
    "MonthOption",
    "MonthListResponse",
    "VolumeRequest",
    "VolumeResponse",
]
