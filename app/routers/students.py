"""Student (talent) endpoints.

GET  /           filtered, sorted candidate listing plus skill vocabulary
GET  /skills     skill vocabulary only
POST /           register or update the signed-in student's profile
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.auth import CurrentUser, get_current_user
from app.core.exceptions import FetchFailure, SaveFailure
from app.db.supabase import fetch_resource
from app.models.candidate import StudentCreate, StudentSaved
from app.models.enums import SortDirective
from app.models.query import CandidateListResponse, QueryState, SkillVocabularyResponse
from app.services.candidate_query import list_candidates, list_skills
from app.services.submissions import save_student

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=CandidateListResponse)
async def get_students(
    search: str = Query(
        default="",
        description="Case-insensitive text matched against name, degree and skills",
    ),
    skill: str | None = Query(
        default=None,
        description="Exact skill tag to filter by (omit for all)",
    ),
    sort: SortDirective = Query(
        default=SortDirective.none,
        description="Name order; 'none' keeps newest-first order",
    ),
) -> CandidateListResponse:
    """Return the candidates matching the query controls."""
    query = QueryState(search=search, skill=skill, sort=sort)
    try:
        return list_candidates(query, fetch_resource)
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc


@router.get("/skills", response_model=SkillVocabularyResponse)
async def get_student_skills() -> SkillVocabularyResponse:
    """Return every distinct skill across all students, sorted."""
    try:
        return SkillVocabularyResponse(skills=list_skills(fetch_resource))
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc


@router.post("", response_model=StudentSaved, status_code=201)
async def create_student(
    body: StudentCreate,
    user: CurrentUser = Depends(get_current_user),
) -> StudentSaved:
    """Store the signed-in student's profile."""
    try:
        return save_student(body, user)
    except SaveFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
