"""Supabase client singleton and resource-level read/write helpers.

``get_supabase()`` returns a lazily-initialized, process-wide client using
credentials from ``settings``.  The helpers below are the only places that
turn Supabase responses into plain Python mappings, so the services never
see the fluent query API.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from supabase import Client, create_client

from app.core.config import settings
from app.core.constants import FETCH_ERROR_PREFIX
from app.core.exceptions import FetchFailure, SaveFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_client: Client | None = None


def get_supabase() -> Client:
    """Return the singleton Supabase client, creating it on first call."""
    global _client
    if _client is None:
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client


def fetch_resource(resource: str) -> dict[str, dict[str, Any]]:
    """Return every row stored under *resource* keyed by its ``id``.

    The id column is removed from each row's fields; callers attach it back
    where they need it.  Rows without an id cannot be addressed and are
    skipped.

    Raises ``FetchFailure`` when the query itself fails.
    """
    try:
        result = get_supabase().table(resource).select("*").execute()
    except Exception as exc:
        logger.error(
            "fetch_resource_failed",
            extra={"resource": resource, "error_message": str(exc)},
        )
        raise FetchFailure(f"{FETCH_ERROR_PREFIX}: {exc}", resource=resource) from exc

    records: dict[str, dict[str, Any]] = {}
    for row in result.data or []:
        row_id = row.get("id")
        if row_id is None:
            logger.warning("fetch_resource_row_without_id", extra={"resource": resource})
            continue
        records[str(row_id)] = {k: v for k, v in row.items() if k != "id"}

    logger.info(
        "fetch_resource_done",
        extra={"resource": resource, "row_count": len(records)},
    )
    return records


def insert_record(resource: str, fields: dict[str, Any]) -> str:
    """Insert a new row and return the id Supabase generated for it."""
    try:
        result = get_supabase().table(resource).insert(fields).execute()
    except Exception as exc:
        logger.error(
            "insert_record_failed",
            extra={"resource": resource, "error_message": str(exc)},
        )
        raise SaveFailure(f"Could not save {resource}: {exc}", resource=resource) from exc

    rows = result.data or []
    if not rows or rows[0].get("id") is None:
        raise SaveFailure(f"Could not save {resource}: no id returned", resource=resource)
    return str(rows[0]["id"])


def upsert_record(resource: str, record_id: str, fields: dict[str, Any]) -> str:
    """Write *fields* under a caller-chosen *record_id*, replacing any prior row."""
    payload = {"id": record_id, **fields}
    try:
        get_supabase().table(resource).upsert(payload, on_conflict="id").execute()
    except Exception as exc:
        logger.error(
            "upsert_record_failed",
            extra={
                "resource": resource,
                "record_id": record_id,
                "error_message": str(exc),
            },
        )
        raise SaveFailure(f"Could not save {resource}: {exc}", resource=resource) from exc
    return record_id


def build_records(
    model: type[ModelT],
    raw: Mapping[str, Mapping[str, Any]],
    resource: str,
) -> list[ModelT]:
    """Turn an ``{id: fields}`` mapping into *model* instances.

    Rows that do not validate are logged and skipped so that one bad row
    does not hide the rest of the resource.
    """
    records: list[ModelT] = []
    for record_id, fields in raw.items():
        try:
            records.append(model(**{**fields, "id": record_id}))
        except ValidationError as exc:
            logger.warning(
                "fetch_resource_row_invalid",
                extra={
                    "resource": resource,
                    "record_id": record_id,
                    "error_message": str(exc),
                },
            )
    return records
