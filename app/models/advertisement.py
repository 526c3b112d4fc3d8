"""Pydantic models for the ``advertisements`` table (company job posts)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from app.models import validation


class AdvertisementCreate(BaseModel):
    """Payload submitted by a company. Every field is mandatory."""
    company_name: str
    position: str
    contact_person: str
    contact_email: str
    contact_phone: str
    message: str

    @field_validator("company_name", "position", "contact_person", "contact_phone", "message")
    @classmethod
    def check_required(cls, value: str) -> str:
        return validation.required_text(value)

    @field_validator("contact_email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return validation.email(value)


class Advertisement(BaseModel):
    """Full advertisement record returned from the database."""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str
    company_name: str = ""
    position: str = ""
    contact_person: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    message: str | None = None
    posted_at: datetime | None = None


class AdvertisementListResponse(BaseModel):
    """Full response for GET /api/v1/advertisements."""
    advertisements: list[Advertisement] = []
    count: int = 0
    message: str | None = None


class AdvertisementSaved(BaseModel):
    id: str
    posted_at: datetime
