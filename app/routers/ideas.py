"""Startup idea endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.core.exceptions import FetchFailure, SaveFailure
from app.models.idea import IdeaCreate, IdeaListResponse, IdeaSaved
from app.services.submissions import list_ideas, save_idea

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=IdeaListResponse)
async def get_ideas() -> IdeaListResponse:
    try:
        return list_ideas()
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc


@router.post("", response_model=IdeaSaved, status_code=201)
async def create_idea(body: IdeaCreate) -> IdeaSaved:
    """Post a new startup idea. Posting does not require sign-in."""
    try:
        return save_idea(body)
    except SaveFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
