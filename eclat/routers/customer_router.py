from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from eclat.crud import dashboard_crud
from eclat.database import get_stores
from eclat.schemas.dashboard_schema import CustomerDashboard
from eclat.schemas.order_schema import Order
from eclat.schemas.reservation_schema import Reservation

router = APIRouter(prefix="/api/customer", tags=["Customer"])


@router.get(
    "/dashboard",
    response_model=CustomerDashboard,
    summary="Loyalty dashboard",
    description="Orders, reservations, spend and membership tier for an email. Without an email a guest placeholder is returned.",
)
def get_dashboard(email: Optional[str] = Query(None), stores=Depends(get_stores)):
    return dashboard_crud.get_dashboard(stores, email)


@router.get("/orders", response_model=List[Order])
def get_customer_orders(email: Optional[str] = Query(None), stores=Depends(get_stores)):
    return dashboard_crud.customer_orders(stores, email)


@router.get("/reservations", response_model=List[Reservation])
def get_customer_reservations(email: Optional[str] = Query(None), stores=Depends(get_stores)):
    return dashboard_crud.customer_reservations(stores, email)
