"""
logic/ - pure business logic
────────────────────────────────────
Plain Python, no Streamlit or FastAPI imports.
The API (backend/app) and the Streamlit pages both call into this package.

Modules:
- models.py: Seller / Order records, derived report rows, validation
- store.py: in-memory record store (cascade delete, snapshots)
- report.py: monthly and per-seller revenue aggregation
- export.py: CSV export
- formats.py: IDR / month / volume formatting, month and seller selectors, dimension calculator
"""

# records
from .models import (
    Seller,
    Order,
    MonthlyStats,
    SellerStats,
    new_id,
    validate_month,
    validate_seller,
    validate_order,
)

# store
from .store import (
    RecordStore,
    RecordNotFoundError,
    get_store,
)

# reports
from .report import (
    UNKNOWN_SELLER,
    order_charges,
    compute_monthly_stats,
    compute_seller_stats,
    monthly_stats_frame,
    seller_stats_frame,
)

# export
from .export import (
    SELLER_EXPORT_HEADERS,
    SELLER_EXPORT_FIELDS,
    ORDER_EXPORT_HEADERS,
    ORDER_EXPORT_FIELDS,
    MONTHLY_EXPORT_HEADERS,
    MONTHLY_EXPORT_FIELDS,
    resolve_field,
    to_csv,
    export_filename,
    seller_export_rows,
    order_export_rows,
)

# formatting
from .formats import (
    MONTH_OPTIONS,
    month_options,
    format_month,
    format_idr,
    format_volume,
    volume_from_dimensions,
    seller_choices,
)

__all__ = [
    # models
    "Seller",
    "Order",
    "MonthlyStats",
    "SellerStats",
    "new_id",
    "validate_month",
    "validate_seller",
    "validate_order",
    # store
    "RecordStore",
    "RecordNotFoundError",
    "get_store",
    # report
    "UNKNOWN_SELLER",
    "order_charges",
    "compute_monthly_stats",
    "compute_seller_stats",
    "monthly_stats_frame",
    "seller_stats_frame",
    # export
    "SELLER_EXPORT_HEADERS",
    "SELLER_EXPORT_FIELDS",
    "ORDER_EXPORT_HEADERS",
    "ORDER_EXPORT_FIELDS",
    "MONTHLY_EXPORT_HEADERS",
    "MONTHLY_EXPORT_FIELDS",
    "resolve_field",
    "to_csv",
    "export_filename",
    "seller_export_rows",
    "order_export_rows",
    # formats
    "MONTH_OPTIONS",
    "month_options",
    "format_month",
    "format_idr",
    "format_volume",
    "volume_from_dimensions",
    "seller_choices",
]
