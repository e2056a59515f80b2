"""
backend/app/api/sellers.py - seller management API
"""
from typing import List

from fastapi import APIRouter, HTTPException

from logic import RecordNotFoundError, get_store
from backend.app.models import (
    BAD_REQUEST,
    NOT_FOUND,
    SellerCreate,
    SellerDeleteResponse,
    SellerResponse,
    SellerUpdate,
)

router = APIRouter(prefix="/sellers", tags=["sellers"])


@router.get("", response_model=List[SellerResponse])
@router.get("/", response_model=List[SellerResponse])
async def list_sellers():
    """All sellers in creation order."""
    return [s.to_dict() for s in get_store().list_sellers()]


@router.get("/{seller_id}", response_model=SellerResponse, responses=NOT_FOUND)
async def get_seller(seller_id: str):
    try:
        return get_store().get_seller(seller_id).to_dict()
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=SellerResponse, status_code=201, responses=BAD_REQUEST)
@router.post("/", response_model=SellerResponse, status_code=201, responses=BAD_REQUEST)
async def create_seller(data: SellerCreate):
    try:
        seller = get_store().create_seller(**data.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return seller.to_dict()


@router.put("/{seller_id}", response_model=SellerResponse, responses={**NOT_FOUND, **BAD_REQUEST})
async def update_seller(seller_id: str, data: SellerUpdate):
    """Change name / rates. The id stays the same."""
    try:
        seller = get_store().update_seller(seller_id, **data.model_dump(exclude_none=True))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return seller.to_dict()


@router.delete("/{seller_id}", response_model=SellerDeleteResponse, responses=NOT_FOUND)
async def delete_seller(seller_id: str):
    """Delete a seller together with all of its orders."""
    try:
        removed = get_store().delete_seller(seller_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "success", "deleted": seller_id, "orders_deleted": removed}
