"""Pydantic models for the ``students`` table.

``CandidateRecord`` is the read side shown on the talent listing; it is
lenient because rows are written by several client versions.
``StudentCreate`` is the registration form payload and carries every
validation rule of that form.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import MSG_SKILLS_REQUIRED
from app.models import validation
from app.models.enums import Sex, StudentStatus


class CandidateRecord(BaseModel):
    """A student as listed for companies. Never mutated after fetch."""
    model_config = ConfigDict(from_attributes=True, frozen=True, extra="ignore")

    id: str
    full_name: str = ""
    address: str = ""
    degree: str = ""
    phone_no: str = ""
    linkedin: str | None = None
    skills: list[str] = Field(default_factory=list)
    university: str | None = None
    status: str | None = None
    posted_at: datetime | None = None

    @field_validator("full_name", "address", "degree", "phone_no", mode="before")
    @classmethod
    def coerce_null_text_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_null_skills_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class StudentCreate(BaseModel):
    """Payload submitted by a student registering their profile."""
    full_name: str
    date_of_birth: date
    sex: Sex = Sex.male
    phone_no: str
    email: str
    university_email: str | None = None
    linkedin: str | None = None
    university: str
    degree: str
    status: StudentStatus = StudentStatus.intern
    address: str
    nic_no: str
    skills: list[str]

    @field_validator("full_name", "university", "degree", "address")
    @classmethod
    def check_required(cls, value: str) -> str:
        return validation.required_text(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return validation.email(value)

    @field_validator("university_email")
    @classmethod
    def check_university_email(cls, value: str | None) -> str | None:
        value = validation.optional_text(value)
        return None if value is None else validation.email(value)

    @field_validator("phone_no")
    @classmethod
    def check_phone(cls, value: str) -> str:
        return validation.phone(value)

    @field_validator("nic_no")
    @classmethod
    def check_nic(cls, value: str) -> str:
        return validation.nic(value)

    @field_validator("linkedin")
    @classmethod
    def check_linkedin(cls, value: str | None) -> str | None:
        return validation.linkedin(value)

    @field_validator("skills")
    @classmethod
    def check_skills(cls, value: list[str]) -> list[str]:
        # Drop blanks and repeats but keep the order the student chose
        cleaned: list[str] = []
        for skill in value:
            skill = skill.strip()
            if skill and skill not in cleaned:
                cleaned.append(skill)
        if not cleaned:
            raise ValueError(MSG_SKILLS_REQUIRED)
        return cleaned


class StudentSaved(BaseModel):
    """Response returned after a student profile is stored."""
    id: str
    posted_at: datetime
