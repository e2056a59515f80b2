"""
backend/app/main.py - FastAPI application
───────────────────────────────────────────────────
Thin API layer over the logic/ package.

Run:
    # development
    uvicorn backend.app.main:app --reload --port 8000

    # production (one worker: records live in process memory)
    gunicorn backend.app.main:app -w 1 -k uvicorn.workers.UvicornWorker -b 0.0.0.0:8000
"""
import logging
import math

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api import (
    calculate_router,
    health_router,
    orders_router,
    reports_router,
    sellers_router,
)
from backend.app.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Seller billing and monthly revenue report API",
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.cors_methods_list,
    allow_headers=settings.cors_headers_list,
)

app.include_router(health_router)
app.include_router(sellers_router)
app.include_router(orders_router)
app.include_router(reports_router)
app.include_router(calculate_router)


def _json_safe(value):
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """422 as usual; NaN / Infinity inputs are echoed back as text (JSON has no literal for them)."""
    return JSONResponse(status_code=422, content={"detail": _json_safe(jsonable_encoder(exc.errors()))})


@app.get("/")
async def root():
    """API root."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
    }


logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
