from __future__ import annotations

import logging
import re
from typing import List

from fastapi import HTTPException, status

from eclat.schemas import ContactStatus
from eclat.schemas.contact_schema import ContactCreate, ContactMessage
from eclat.utils.helper import new_id, utcnow

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def list_contacts(stores) -> List[ContactMessage]:
    return stores.contacts.list()


def create_contact(stores, payload: ContactCreate) -> ContactMessage:
    if not payload.first_name or not payload.last_name or not payload.email or not payload.message:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required information")
    if not EMAIL_RE.fullmatch(payload.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email address")

    contact = ContactMessage(
        id=new_id(),
        name=f"{payload.first_name} {payload.last_name}",
        email=payload.email,
        phone=payload.phone or "",
        message=payload.message,
        status=ContactStatus.NEW,
        created_at=utcnow(),
    )
    stores.contacts.add(contact)
    logger.info("New contact message received: %s", contact.id)
    return contact


def mark_read(stores, contact_id: str) -> ContactMessage:
    contact = stores.contacts.update(contact_id, {"status": ContactStatus.READ})
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact message not found")
    return contact
