"""Submission and listing service for students, ideas and advertisements.

Validated payloads are stamped with ``posted_at`` and written to Supabase.
Student profiles and advertisements are keyed by the submitting user's id,
so a second submission replaces the first.  Ideas get a fresh id each time.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from app.core.auth import CurrentUser
from app.core.config import settings
from app.core.constants import MSG_NO_ADVERTISEMENTS, MSG_NO_IDEAS
from app.db.supabase import build_records, fetch_resource, insert_record, upsert_record
from app.models.advertisement import (
    Advertisement,
    AdvertisementCreate,
    AdvertisementListResponse,
    AdvertisementSaved,
)
from app.models.candidate import StudentCreate, StudentSaved
from app.models.idea import Idea, IdeaCreate, IdeaListResponse, IdeaSaved

logger = logging.getLogger(__name__)


def _stamp(payload: dict[str, Any]) -> tuple[dict[str, Any], datetime]:
    posted_at = datetime.now(timezone.utc)
    return {**payload, "posted_at": posted_at.isoformat()}, posted_at


# ---------------------------------------------------------------------------
# Students
# ---------------------------------------------------------------------------

def save_student(student: StudentCreate, user: CurrentUser) -> StudentSaved:
    """Store *student* as the profile of *user*."""
    fields, posted_at = _stamp(student.model_dump(mode="json"))
    record_id = upsert_record(settings.STUDENTS_TABLE, user.id, fields)
    logger.info("student_saved", extra={"record_id": record_id})
    return StudentSaved(id=record_id, posted_at=posted_at)


# ---------------------------------------------------------------------------
# Ideas
# ---------------------------------------------------------------------------

def save_idea(idea: IdeaCreate) -> IdeaSaved:
    """Store a new startup idea under a storage-generated id."""
    fields, posted_at = _stamp(idea.model_dump(mode="json"))
    record_id = insert_record(settings.IDEAS_TABLE, fields)
    logger.info("idea_saved", extra={"record_id": record_id})
    return IdeaSaved(id=record_id, posted_at=posted_at)


def list_ideas() -> IdeaListResponse:
    """Return every idea in storage order.

    Raises ``FetchFailure`` when the ideas cannot be retrieved.
    """
    raw = fetch_resource(settings.IDEAS_TABLE)
    ideas = build_records(Idea, raw, settings.IDEAS_TABLE)
    return IdeaListResponse(
        ideas=ideas,
        count=len(ideas),
        message=None if ideas else MSG_NO_IDEAS,
    )


# ---------------------------------------------------------------------------
# Advertisements
# ---------------------------------------------------------------------------

def save_advertisement(ad: AdvertisementCreate, user: CurrentUser) -> AdvertisementSaved:
    """Store *ad* as the advertisement of *user*'s company."""
    fields, posted_at = _stamp(ad.model_dump(mode="json"))
    record_id = upsert_record(settings.ADVERTISEMENTS_TABLE, user.id, fields)
    logger.info("advertisement_saved", extra={"record_id": record_id})
    return AdvertisementSaved(id=record_id, posted_at=posted_at)


def list_advertisements() -> AdvertisementListResponse:
    """Return every advertisement, newest first.

    Raises ``FetchFailure`` when the advertisements cannot be retrieved.
    """
    raw = fetch_resource(settings.ADVERTISEMENTS_TABLE)
    ads = build_records(Advertisement, raw, settings.ADVERTISEMENTS_TABLE)
    ads.sort(key=lambda ad: ad.posted_at.timestamp() if ad.posted_at else float("-inf"), reverse=True)
    return AdvertisementListResponse(
        advertisements=ads,
        count=len(ads),
        message=None if ads else MSG_NO_ADVERTISEMENTS,
    )
