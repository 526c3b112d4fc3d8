"""Reusable field checks for the submission models.

Each helper raises ``ValueError`` with the message shown next to the form
field, which pydantic turns into a 422 error entry.
"""

from __future__ import annotations

from app.core.constants import (
    EMAIL_PATTERN,
    LINKEDIN_PATTERN,
    MSG_INVALID_EMAIL,
    MSG_INVALID_LINKEDIN,
    MSG_INVALID_NIC,
    MSG_INVALID_PHONE,
    MSG_REQUIRED,
    NIC_PATTERN,
    PHONE_PATTERN,
)


def required_text(value: str) -> str:
    """Strip *value* and reject it when nothing is left."""
    stripped = value.strip()
    if not stripped:
        raise ValueError(MSG_REQUIRED)
    return stripped


def optional_text(value: str | None) -> str | None:
    """Normalize blank optional input to ``None``."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def email(value: str) -> str:
    value = required_text(value)
    if not EMAIL_PATTERN.match(value):
        raise ValueError(MSG_INVALID_EMAIL)
    return value


def phone(value: str) -> str:
    """Accept 9-12 digits with an optional leading ``+``; spaces are ignored."""
    value = required_text(value)
    if not PHONE_PATTERN.match("".join(value.split())):
        raise ValueError(MSG_INVALID_PHONE)
    return value


def nic(value: str) -> str:
    value = required_text(value)
    if not NIC_PATTERN.match(value):
        raise ValueError(MSG_INVALID_NIC)
    return value


def linkedin(value: str | None) -> str | None:
    value = optional_text(value)
    if value is not None and not LINKEDIN_PATTERN.match(value):
        raise ValueError(MSG_INVALID_LINKEDIN)
    return value
