from __future__ import annotations

from datetime import datetime
from typing import Optional

from . import CamelModel, ContactStatus


class ContactMessage(CamelModel):
    id: str
    name: str
    email: str
    phone: str = ""
    message: str
    status: ContactStatus = ContactStatus.NEW
    created_at: datetime


class ContactCreate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(CamelModel):
    success: bool = True
    contact: ContactMessage
    message: str
