"""Contact form service: stores messages sent from the public contact page."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from app.core.config import settings
from app.db.supabase import insert_record
from app.models.contact import ContactMessageCreate, ContactMessageSaved

logger = logging.getLogger(__name__)


def save_contact_message(message: ContactMessageCreate) -> ContactMessageSaved:
    """Persist *message* and return its id.

    Raises ``SaveFailure`` when the row cannot be written.
    """
    received_at = datetime.now(timezone.utc)
    fields = {**message.model_dump(mode="json"), "received_at": received_at.isoformat()}
    record_id = insert_record(settings.CONTACT_TABLE, fields)
    logger.info(
        "contact_message_saved",
        extra={"record_id": record_id, "subject": message.subject},
    )
    return ContactMessageSaved(id=record_id, received_at=received_at)
