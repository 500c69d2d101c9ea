from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from . import CamelModel, ReservationStatus


class ReservationDetails(CamelModel):
    adults: int = Field(..., ge=1)
    children: int = 0
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    area: str = "Indoor"
    comment: str = ""


class ReservationContact(CamelModel):
    first_name: str
    last_name: str
    email: str
    phone: str


class Reservation(CamelModel):
    id: str
    reservation_id: str
    details: ReservationDetails
    contact: ReservationContact
    status: ReservationStatus = ReservationStatus.PENDING
    created_at: datetime
    updated_at: datetime


class ContactIn(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ReservationCreate(CamelModel):
    adults: Optional[int] = None
    children: Optional[int] = None
    date: Optional[str] = None
    time: Optional[str] = None
    area: Optional[str] = None
    comment: Optional[str] = None
    contact: Optional[ContactIn] = None


class ReservationResponse(CamelModel):
    success: bool = True
    reservation: Reservation
    message: str
