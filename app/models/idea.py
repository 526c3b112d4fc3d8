"""Pydantic models for the ``ideas`` table (startup ideas posted by founders)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models import validation
from app.models.enums import StartupNeed, StartupStatus


class IdeaCreate(BaseModel):
    """Payload submitted by a founder posting an idea."""
    founder_name: str
    company_name: str
    project_name: str
    idea_description: str
    startup_status: StartupStatus = StartupStatus.planning
    needs: list[StartupNeed] = Field(default_factory=list)
    contact_phone: str
    contact_email: str
    founder_degree: str | None = None
    founder_skills: list[str] = Field(default_factory=list)

    @field_validator(
        "founder_name", "company_name", "project_name", "idea_description", "contact_phone"
    )
    @classmethod
    def check_required(cls, value: str) -> str:
        return validation.required_text(value)

    @field_validator("contact_email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return validation.email(value)

    @field_validator("founder_degree")
    @classmethod
    def check_degree(cls, value: str | None) -> str | None:
        return validation.optional_text(value)

    @field_validator("needs")
    @classmethod
    def dedupe_needs(cls, value: list[StartupNeed]) -> list[StartupNeed]:
        return list(dict.fromkeys(value))


class Idea(BaseModel):
    """Full idea record returned from the database."""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str
    founder_name: str = ""
    company_name: str = ""
    project_name: str = ""
    idea_description: str = ""
    startup_status: str | None = None
    needs: list[str] = Field(default_factory=list)
    contact_phone: str | None = None
    contact_email: str | None = None
    founder_degree: str | None = None
    founder_skills: list[str] = Field(default_factory=list)
    posted_at: datetime | None = None

    @field_validator("needs", "founder_skills", mode="before")
    @classmethod
    def coerce_null_list(cls, value: Any) -> Any:
        return [] if value is None else value


class IdeaListResponse(BaseModel):
    """Full response for GET /api/v1/ideas."""
    ideas: list[Idea] = []
    count: int = 0
    message: str | None = None


class IdeaSaved(BaseModel):
    id: str
    posted_at: datetime
