import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from eclat.crud import order_crud
from eclat.database import get_feed, get_settings, get_stores
from eclat.schemas.order_schema import Order, OrderCreate, OrderResponse, StatusUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get("", response_model=List[Order])
def get_orders(
    status: Optional[str] = Query(None, description="Filter by status"),
    order_type: Optional[str] = Query(None, alias="orderType", description="Filter by order type"),
    stores=Depends(get_stores),
):
    return order_crud.list_orders(stores, status=status, order_type=order_type)


@router.get("/{order_id}", response_model=Order)
def get_order(order_id: str, stores=Depends(get_stores)):
    return order_crud.get_order(stores, order_id)


# Checkout. Not idempotent: a double submit creates two orders.
@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderCreate,
    stores=Depends(get_stores),
    settings=Depends(get_settings),
    feed=Depends(get_feed),
):
    try:
        order = order_crud.create_order(
            stores,
            payload,
            tax_rate=settings.TAX_RATE,
            delivery_fee=settings.DELIVERY_FEE,
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error creating order")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create order")
    await feed.broadcast("order.created", order)
    return OrderResponse(order=order, message="Order placed successfully")


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    body: StatusUpdate,
    stores=Depends(get_stores),
    settings=Depends(get_settings),
    feed=Depends(get_feed),
):
    try:
        order = order_crud.update_order_status(
            stores,
            order_id,
            body.status,
            enforce_transitions=settings.ENFORCE_STATUS_TRANSITIONS,
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating order %s", order_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update order")
    await feed.broadcast("order.updated", order)
    return OrderResponse(order=order, message="Order status updated")


@router.delete("/{order_id}", response_model=OrderResponse)
async def delete_order(order_id: str, stores=Depends(get_stores), feed=Depends(get_feed)):
    try:
        order = order_crud.delete_order(stores, order_id)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error deleting order %s", order_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete order")
    await feed.broadcast("order.deleted", order)
    return OrderResponse(order=order, message="Order deleted")
