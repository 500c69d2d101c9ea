import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from eclat.crud import reservation_crud
from eclat.database import get_feed, get_settings, get_stores
from eclat.schemas.order_schema import StatusUpdate
from eclat.schemas.reservation_schema import Reservation, ReservationCreate, ReservationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reservations", tags=["Reservations"])


@router.get("", response_model=List[Reservation])
def get_reservations(
    status: Optional[str] = Query(None, description="Filter by status"),
    date: Optional[str] = Query(None, description="Filter by YYYY-MM-DD"),
    stores=Depends(get_stores),
):
    return reservation_crud.list_reservations(stores, status=status, date=date)


@router.get("/{reservation_id}", response_model=Reservation)
def get_reservation(reservation_id: str, stores=Depends(get_stores)):
    return reservation_crud.get_reservation(stores, reservation_id)


# No capacity model: overlapping bookings for the same slot are all accepted
@router.post("", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
async def create_reservation(payload: ReservationCreate, stores=Depends(get_stores), feed=Depends(get_feed)):
    try:
        reservation = reservation_crud.create_reservation(stores, payload)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error creating reservation")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create reservation")
    await feed.broadcast("reservation.created", reservation)
    return ReservationResponse(reservation=reservation, message="Reservation request submitted successfully")


@router.patch("/{reservation_id}/status", response_model=ReservationResponse)
async def update_reservation_status(
    reservation_id: str,
    body: StatusUpdate,
    stores=Depends(get_stores),
    settings=Depends(get_settings),
    feed=Depends(get_feed),
):
    try:
        reservation = reservation_crud.update_reservation_status(
            stores,
            reservation_id,
            body.status,
            enforce_transitions=settings.ENFORCE_STATUS_TRANSITIONS,
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating reservation %s", reservation_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update reservation")
    await feed.broadcast("reservation.updated", reservation)
    return ReservationResponse(reservation=reservation, message="Reservation status updated")


@router.delete("/{reservation_id}", response_model=ReservationResponse)
async def delete_reservation(reservation_id: str, stores=Depends(get_stores), feed=Depends(get_feed)):
    try:
        reservation = reservation_crud.delete_reservation(stores, reservation_id)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error deleting reservation %s", reservation_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete reservation")
    await feed.broadcast("reservation.deleted", reservation)
    return ReservationResponse(reservation=reservation, message="Reservation deleted")
