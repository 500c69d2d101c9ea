from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from eclat.crud import dashboard_crud, menu_crud, reservation_crud
from eclat.database import get_feed, get_settings, get_stores
from eclat.schemas.dashboard_schema import AdminStats
from eclat.schemas.menu_schema import MenuItem, MenuItemCreate, MenuItemUpdate
from eclat.schemas.order_schema import StatusUpdate
from eclat.schemas.reservation_schema import Reservation

# No auth in front of these routes; deploy behind something that provides it
router = APIRouter(prefix="/api/admin", tags=["Admin"])
stats_router = APIRouter(prefix="/api", tags=["Admin"])


# ---------------- MENU ----------------
@router.post("/menu", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
async def create_menu_item(obj_in: MenuItemCreate, stores=Depends(get_stores), feed=Depends(get_feed)):
    item = menu_crud.create_menu_item(stores, obj_in)
    await feed.broadcast("menu.created", item)
    return item


@router.put("/menu/{item_id}", response_model=MenuItem)
async def update_menu_item(item_id: int, obj_in: MenuItemUpdate, stores=Depends(get_stores), feed=Depends(get_feed)):
    item = menu_crud.update_menu_item(stores, item_id, obj_in)
    await feed.broadcast("menu.updated", item)
    return item


@router.delete("/menu/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_menu_item(item_id: int, stores=Depends(get_stores), feed=Depends(get_feed)):
    removed = menu_crud.delete_menu_item(stores, item_id)
    if removed is not None:
        await feed.broadcast("menu.deleted", removed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------- RESERVATIONS ----------------
@router.get("/reservations", response_model=List[Reservation])
def admin_reservations(
    status: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
    stores=Depends(get_stores),
):
    return reservation_crud.list_reservations(stores, status=status, date=date)


@router.patch("/reservations/{reservation_id}/status", response_model=Reservation)
async def admin_reservation_status(
    reservation_id: str,
    body: StatusUpdate,
    stores=Depends(get_stores),
    settings=Depends(get_settings),
    feed=Depends(get_feed),
):
    reservation = reservation_crud.update_reservation_status(
        stores,
        reservation_id,
        body.status,
        enforce_transitions=settings.ENFORCE_STATUS_TRANSITIONS,
    )
    await feed.broadcast("reservation.updated", reservation)
    return reservation


# ---------------- STATS ----------------
@router.get("/stats", response_model=AdminStats)
def admin_stats(stores=Depends(get_stores)):
    return dashboard_crud.admin_stats(stores)


@stats_router.get("/stats", response_model=AdminStats)
def get_stats(stores=Depends(get_stores)):
    return dashboard_crud.admin_stats(stores)
