from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import HTTPException, status

from eclat.crud.base import transition_guard
from eclat.schemas import RESERVATION_TRANSITIONS, ReservationStatus
from eclat.schemas.reservation_schema import (
    Reservation,
    ReservationContact,
    ReservationCreate,
    ReservationDetails,
)
from eclat.utils.helper import generate_reservation_code, new_id, utcnow

logger = logging.getLogger(__name__)


def list_reservations(stores, status: Optional[str] = None, date: Optional[str] = None) -> List[Reservation]:
    return stores.reservations.list({"status": status, "details.date": date})


def get_reservation(stores, reservation_id: str) -> Reservation:
    return stores.reservations.get_or_404(reservation_id)


def create_reservation(stores, payload: ReservationCreate) -> Reservation:
    if not payload.adults or payload.adults < 1 or not payload.date or not payload.time:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required reservation information")
    c = payload.contact
    if not c or not c.first_name or not c.last_name or not c.email or not c.phone:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing contact information")

    now = utcnow()
    reservation = Reservation(
        id=new_id(),
        reservation_id=generate_reservation_code(now),
        details=ReservationDetails(
            adults=payload.adults,
            children=payload.children or 0,
            date=payload.date,
            time=payload.time,
            area=payload.area or "Indoor",
            comment=payload.comment or "",
        ),
        contact=ReservationContact(
            first_name=c.first_name,
            last_name=c.last_name,
            email=c.email,
            phone=c.phone,
        ),
        status=ReservationStatus.PENDING,
        created_at=now,
        updated_at=now,
    )
    stores.reservations.add(reservation)
    logger.info("New reservation received: %s", reservation.reservation_id)
    return reservation


def parse_status(value: Optional[str]) -> ReservationStatus:
    try:
        return ReservationStatus(value)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")


def update_reservation_status(stores, reservation_id: str, new_status: Optional[str], *, enforce_transitions: bool = False) -> Reservation:
    reservation_status = parse_status(new_status)
    guard = transition_guard(RESERVATION_TRANSITIONS, reservation_status, enforce_transitions)
    reservation = stores.reservations.update(
        reservation_id,
        {"status": reservation_status, "updated_at": utcnow()},
        guard=guard,
    )
    if reservation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    logger.info("Reservation %s status -> %s", reservation.reservation_id, reservation_status.value)
    return reservation


def delete_reservation(stores, reservation_id: str) -> Reservation:
    reservation = stores.reservations.remove(reservation_id)
    if reservation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    logger.info("Reservation deleted: %s", reservation.reservation_id)
    return reservation


def reservations_for_email(stores, email: str) -> List[Reservation]:
    needle = email.strip().lower()
    return [r for r in stores.reservations.list() if (r.contact.email or "").lower() == needle]
