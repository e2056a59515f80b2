"""
backend/app/api - API routers
───────────────────────────────────
One router per domain.
"""

from .health import router as health_router
from .sellers import router as sellers_router
from .orders import router as orders_router
from .reports import router as reports_router
from .calculate import router as calculate_router

__all__ = [
    "health_router",
    "sellers_router",
    "orders_router",
    "reports_router",
    "calculate_router",
]
