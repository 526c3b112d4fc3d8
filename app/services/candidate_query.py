"""Candidate listing: search, skill filter and name sort over the master list.

The master list is fetched once per page visit, ordered newest first, and
never mutated.  Everything shown to the user is recomputed from it by
``derive(master, query)``, a pure function.  ``CandidateQueryView`` holds
the master list and the current ``QueryState`` for callers that keep a
view alive across several control changes.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from app.core.config import settings
from app.core.constants import MSG_NO_CANDIDATES
from app.core.exceptions import FetchFailure
from app.db.supabase import build_records
from app.models.candidate import CandidateRecord
from app.models.enums import SortDirective, ViewStatus
from app.models.query import CandidateListResponse, QueryState

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Mapping[str, Mapping[str, Any]]]

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Master list
# ---------------------------------------------------------------------------

def _posted_at_key(record: CandidateRecord) -> tuple[bool, datetime]:
    posted_at = record.posted_at
    if posted_at is None:
        return (False, _EPOCH)
    if posted_at.tzinfo is None:
        posted_at = posted_at.replace(tzinfo=timezone.utc)
    return (True, posted_at)


def to_master_list(
    raw: Mapping[str, Mapping[str, Any]],
    resource: str | None = None,
) -> list[CandidateRecord]:
    """Build the master list from an ``{id: fields}`` mapping.

    The mapping key becomes the record ``id``.  The result is ordered by
    ``posted_at`` descending; undated records go last in mapping order.
    Rows that fail validation are skipped.
    """
    records = build_records(CandidateRecord, raw, resource or settings.STUDENTS_TABLE)
    records.sort(key=_posted_at_key, reverse=True)
    return records


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------

def _collation_key(name: str) -> tuple[str, str]:
    """Locale-style sort key: accents and case only break ties."""
    nfkd = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in nfkd if not unicodedata.combining(ch)).casefold()
    return (base, name)


def _matches_text(record: CandidateRecord, term: str) -> bool:
    return (
        term in record.full_name.lower()
        or term in record.degree.lower()
        or term in " ".join(record.skills).lower()
    )


def derive(master: Sequence[CandidateRecord], query: QueryState) -> list[CandidateRecord]:
    """Return the records to display for *query*, in display order.

    Applies the text filter, then the exact skill filter, then the name
    sort.  *master* is left untouched.
    """
    results = list(master)

    term = query.search.lower()
    if term:
        results = [r for r in results if _matches_text(r, term)]

    # Exact match: the options come from the stored tags themselves
    if query.skill:
        results = [r for r in results if query.skill in r.skills]

    if query.sort is not SortDirective.none:
        results.sort(
            key=lambda r: _collation_key(r.full_name),
            reverse=query.sort is SortDirective.desc,
        )

    return results


def skill_vocabulary(master: Iterable[CandidateRecord]) -> list[str]:
    """All distinct skill tags across *master*, sorted."""
    return sorted({skill for record in master for skill in record.skills})


# ---------------------------------------------------------------------------
# Stateful view
# ---------------------------------------------------------------------------

class CandidateQueryView:
    """Master list plus query state for one page visit.

    The view starts ``loading``.  ``load`` moves it to ``ready`` or, when
    retrieval fails, to ``error`` for the rest of its life.
    """

    def __init__(self) -> None:
        self.status = ViewStatus.loading
        self.error_message: str | None = None
        self._master: tuple[CandidateRecord, ...] = ()
        self._vocabulary: list[str] = []
        self._query = QueryState()

    def load(self, fetch: Fetcher, resource: str | None = None) -> None:
        """Fetch the master list once through *fetch*."""
        if self.status is not ViewStatus.loading:
            raise RuntimeError(f"view already {self.status.value}")

        resource = resource or settings.STUDENTS_TABLE
        try:
            raw = fetch(resource)
        except FetchFailure as exc:
            logger.error(
                "candidate_view_load_failed",
                extra={"resource": resource, "error_message": exc.message},
            )
            self.status = ViewStatus.error
            self.error_message = exc.message
            return

        self.set_master(to_master_list(raw, resource))

    def set_master(self, records: Sequence[CandidateRecord]) -> None:
        """Replace the whole master list. Order is kept as given."""
        self._master = tuple(records)
        self._vocabulary = skill_vocabulary(self._master)
        self.status = ViewStatus.ready
        self.error_message = None

    @property
    def master(self) -> tuple[CandidateRecord, ...]:
        return self._master

    @property
    def query(self) -> QueryState:
        return self._query

    def apply(self, query: QueryState) -> None:
        self._query = query

    def set_search(self, search: str) -> None:
        self._query = self._query.model_copy(update={"search": search})

    def set_skill(self, skill: str | None) -> None:
        self._query = self._query.model_copy(update={"skill": skill or None})

    def set_sort(self, sort: SortDirective) -> None:
        self._query = self._query.model_copy(update={"sort": SortDirective(sort)})

    def reset(self) -> None:
        """Clear search, skill and sort in one step."""
        self._query = QueryState.reset()

    @property
    def vocabulary(self) -> list[str]:
        return list(self._vocabulary)

    @property
    def displayed(self) -> list[CandidateRecord]:
        if self.status is not ViewStatus.ready:
            return []
        return derive(self._master, self._query)

    @property
    def no_results(self) -> bool:
        return self.status is ViewStatus.ready and not self.displayed


# ---------------------------------------------------------------------------
# API entry point
# ---------------------------------------------------------------------------

def list_candidates(query: QueryState, fetch: Fetcher) -> CandidateListResponse:
    """Fetch the students and answer one listing request.

    Raises ``FetchFailure`` when the students cannot be retrieved.
    """
    view = CandidateQueryView()
    view.load(fetch)
    if view.status is ViewStatus.error:
        raise FetchFailure(view.error_message or "", resource=settings.STUDENTS_TABLE)

    view.apply(query)
    displayed = view.displayed
    extra: dict[str, Any] = {"total": len(view.master), "count": len(displayed)}
    if not query.is_default:
        extra.update(search=query.search, skill=query.skill, sort=query.sort.value)
    logger.info("candidates_listed", extra=extra)
    return CandidateListResponse(
        candidates=displayed,
        skills=view.vocabulary,
        total=len(view.master),
        count=len(displayed),
        query=query,
        message=MSG_NO_CANDIDATES if not displayed else None,
    )


def list_skills(fetch: Fetcher) -> list[str]:
    """Return the skill vocabulary of every stored student."""
    view = CandidateQueryView()
    view.load(fetch)
    if view.status is ViewStatus.error:
        raise FetchFailure(view.error_message or "", resource=settings.STUDENTS_TABLE)
    return view.vocabulary
