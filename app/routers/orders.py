from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.core.config import Settings
from app.models.order import OrderDeleted, OrderIn, OrderOut
from app.services.orders import OrderService
from .deps import get_app_settings, get_order_service

router = APIRouter(prefix="/api/orders", tags=["orders"])

# Handlers are plain `def`: the sqlite DAL blocks, so FastAPI runs them in its
# threadpool. OrderNotFound / StorageError are mapped by the app's handlers.


@router.get("", response_model=List[OrderOut], summary="List recent orders")
def list_orders(
    limit: Optional[int] = Query(
        None, ge=1, description="Max rows (default 50, capped at 200)"
    ),
    settings: Settings = Depends(get_app_settings),
    service: OrderService = Depends(get_order_service),
):
    effective = min(limit or settings.orders_default_limit, settings.orders_max_limit)
    return service.list_recent(effective)


@router.get("/{order_id}", response_model=OrderOut, summary="Get one order")
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    return service.get(order_id)


@router.post(
    "",
    response_model=OrderOut,
    status_code=201,
    summary="Create an order priced at the current base rate",
)
def create_order(payload: OrderIn, service: OrderService = Depends(get_order_service)):
    return service.create(payload)


@router.put(
    "/{order_id}",
    response_model=OrderOut,
    summary="Replace an order and reprice it at the current base rate",
)
def update_order(
    order_id: int,
    payload: OrderIn,
    service: OrderService = Depends(get_order_service),
):
    return service.update(order_id, payload)


@router.delete("/{order_id}", response_model=OrderDeleted, summary="Delete an order")
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    service.delete(order_id)
    return OrderDeleted()
