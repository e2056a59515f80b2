"""
backend/app/api/calculate.py - calculator endpoints
───────────────────────────────────────────────────
Thin wrapper over logic/ helpers used by the order entry form.
"""

from fastapi import APIRouter

from logic import format_volume, volume_from_dimensions
from backend.app.models import VolumeRequest, VolumeResponse

router = APIRouter(prefix="/calculate", tags=["Calculate"])


@router.post("/volume", response_model=VolumeResponse)
async def calculate_volume(req: VolumeRequest) -> VolumeResponse:
    """
    Product volume from its dimensions.

    Args:
        req: length / width / height in cm

    Returns:
        volume in m³
    """
    cubic_meters = volume_from_dimensions(req.length_cm, req.width_cm, req.height_cm)
    return VolumeResponse(cubic_meters=cubic_meters, formatted=format_volume(cubic_meters))
