"""Contact form endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.core.exceptions import SaveFailure
from app.models.contact import ContactMessageCreate, ContactMessageSaved
from app.services.contact import save_contact_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ContactMessageSaved, status_code=201)
async def create_contact_message(body: ContactMessageCreate) -> ContactMessageSaved:
    """Accept a message from the contact page."""
    try:
        return save_contact_message(body)
    except SaveFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
