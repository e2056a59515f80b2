"""
backend/app/api/orders.py - order record API
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException

from logic import UNKNOWN_SELLER, Order, RecordNotFoundError, get_store
from backend.app.models import BAD_REQUEST, NOT_FOUND, OrderCreate, OrderResponse, OrderUpdate

router = APIRouter(prefix="/orders", tags=["orders"])


def _to_response(order: Order, names: Dict[str, str]) -> dict:
    row = order.to_dict()
    row["seller_name"] = names.get(order.seller_id, UNKNOWN_SELLER)
    return row


def _seller_names() -> Dict[str, str]:
    return {s.id: s.name for s in get_store().list_sellers()}


@router.get("", response_model=List[OrderResponse])
@router.get("/", response_model=List[OrderResponse])
async def list_orders(seller_id: Optional[str] = None, month: Optional[str] = None):
    """Order history, optionally filtered by seller and/or month."""
    names = _seller_names()
    return [_to_response(o, names) for o in get_store().list_orders(seller_id=seller_id, month=month)]


@router.get("/{order_id}", response_model=OrderResponse, responses=NOT_FOUND)
async def get_order(order_id: str):
    try:
        order = get_store().get_order(order_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_response(order, _seller_names())


@router.post("", response_model=OrderResponse, status_code=201, responses=BAD_REQUEST)
@router.post("/", response_model=OrderResponse, status_code=201, responses=BAD_REQUEST)
async def create_order(data: OrderCreate):
    try:
        order = get_store().create_order(**data.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(order, _seller_names())


@router.put("/{order_id}", response_model=OrderResponse, responses={**NOT_FOUND, **BAD_REQUEST})
async def update_order(order_id: str, data: OrderUpdate):
    try:
        order = get_store().update_order(order_id, **data.model_dump(exclude_none=True))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(order, _seller_names())


@router.delete("/{order_id}", responses=NOT_FOUND)
async def delete_order(order_id: str):
    try:
        get_store().delete_order(order_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "success", "deleted": order_id}
