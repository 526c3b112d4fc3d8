"""Pydantic models for the contact form."""

from datetime import datetime

from pydantic import BaseModel, field_validator

from app.models import validation


class ContactMessageCreate(BaseModel):
    """Message sent from the public contact page."""
    name: str
    email: str
    subject: str
    message: str

    @field_validator("name", "subject", "message")
    @classmethod
    def check_required(cls, value: str) -> str:
        return validation.required_text(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return validation.email(value)


class ContactMessageSaved(BaseModel):
    id: str
    received_at: datetime
    status: str = "received"
