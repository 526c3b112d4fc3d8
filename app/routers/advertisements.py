"""Company advertisement endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth import CurrentUser, get_current_user
from app.core.exceptions import FetchFailure, SaveFailure
from app.models.advertisement import (
    AdvertisementCreate,
    AdvertisementListResponse,
    AdvertisementSaved,
)
from app.services.submissions import list_advertisements, save_advertisement

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=AdvertisementListResponse)
async def get_advertisements() -> AdvertisementListResponse:
    """Return every advertisement, newest first."""
    try:
        return list_advertisements()
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc


@router.post("", response_model=AdvertisementSaved, status_code=201)
async def create_advertisement(
    body: AdvertisementCreate,
    user: CurrentUser = Depends(get_current_user),
) -> AdvertisementSaved:
    """Store the signed-in company's advertisement."""
    try:
        return save_advertisement(body, user)
    except SaveFailure as exc:
        logger.error(
            "create_advertisement_failed",
            extra={"user_id": user.id, "error_message": exc.message},
        )
        raise HTTPException(status_code=502, detail=exc.message) from exc
