import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from eclat.crud import contact_crud
from eclat.database import get_feed, get_stores
from eclat.schemas.contact_schema import ContactCreate, ContactMessage, ContactResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contacts", tags=["Contact"])


@router.get("", response_model=List[ContactMessage])
def get_contacts(stores=Depends(get_stores)):
    return contact_crud.list_contacts(stores)


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(payload: ContactCreate, stores=Depends(get_stores), feed=Depends(get_feed)):
    try:
        contact = contact_crud.create_contact(stores, payload)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error submitting contact form")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to send message")
    await feed.broadcast("contact.created", contact)
    return ContactResponse(contact=contact, message="Message sent successfully")


@router.patch("/{contact_id}/read", response_model=ContactResponse)
def mark_contact_read(contact_id: str, stores=Depends(get_stores)):
    contact = contact_crud.mark_read(stores, contact_id)
    return ContactResponse(contact=contact, message="Message marked as read")
