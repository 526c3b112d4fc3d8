"""Query state and response models for the candidate listing."""

from pydantic import BaseModel, ConfigDict, field_validator

from app.models.candidate import CandidateRecord
from app.models.enums import SortDirective


class QueryState(BaseModel):
    """Search term, skill selection and sort directive driving the listing.

    ``skill=None`` means the skill filter is off.  Instances are immutable;
    changing a control produces a new state.
    """
    model_config = ConfigDict(frozen=True)

    search: str = ""
    skill: str | None = None
    sort: SortDirective = SortDirective.none

    @field_validator("skill", mode="before")
    @classmethod
    def blank_skill_is_unfiltered(cls, value: str | None) -> str | None:
        # The filter dropdown posts "" for its placeholder option
        return value or None

    @classmethod
    def reset(cls) -> "QueryState":
        """Return the default state: no search, no skill, fetch order."""
        return cls()

    @property
    def is_default(self) -> bool:
        return self == QueryState()


class CandidateListResponse(BaseModel):
    """Full response for GET /api/v1/students."""
    candidates: list[CandidateRecord] = []
    skills: list[str] = []
    total: int = 0
    count: int = 0
    query: QueryState = QueryState()
    message: str | None = None


class SkillVocabularyResponse(BaseModel):
    """Full response for GET /api/v1/students/skills."""
    skills: list[str] = []
