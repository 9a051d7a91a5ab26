"""Candidate list screen: paging, email search, status annotation and deletes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from ..config import DEFAULT_PAGE_SIZE
from ..models.candidate import (
    STATUS_LABELS,
    CandidatePage,
    CandidateRecord,
    CandidateStatus,
    DeleteResult,
    InvalidStatusError,
    coerce_status,
)
from .api_client import RecruitApiError
from .notifications import Notifier

logger = logging.getLogger(__name__)

ALL_STATUSES = "all"

FETCH_ERROR = "Failed to fetch candidates."
SEARCH_ERROR = "Failed to search candidates."
DELETE_ERROR = "Failed to delete candidate."


class CandidateApi(Protocol):
    async def list_candidates(self, page: int, limit: int) -> CandidatePage: ...

    async def search_candidates(self, email: str) -> list[CandidateRecord]: ...

    async def delete_candidate(self, candidate_id: str) -> DeleteResult: ...


@dataclass
class ListState:
    candidates: list[CandidateRecord] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    has_more: bool = False
    search_mode: bool = False
    query: str = ""
    # Email behind the current search results
    searched_email: Optional[str] = None
    status_filter: str = ALL_STATUSES
    loading: bool = False
    search_loading: bool = False
    error: Optional[str] = None
    deleting_ids: set[str] = field(default_factory=set)
    selected_id: Optional[str] = None


def matches_query(record: CandidateRecord, query: str) -> bool:
    """Case-insensitive substring match over the searchable candidate fields."""
    needle = query.lower()
    personal = record.personal_info
    fields = [
        personal.full_name,
        personal.email,
        personal.phone,
        personal.location,
        record.professional_info.current_title,
        record.applied_role,
    ]
    if any(value and needle in value.lower() for value in fields):
        return True
    if any(needle in skill.lower() for skill in record.technical_skills):
        return True
    return any(needle in skill.lower() for skill in record.soft_skills)


def matches_status(record: CandidateRecord, status_filter: str) -> bool:
    return status_filter == ALL_STATUSES or record.status.value == status_filter


def visible_candidates(
    candidates: Sequence[CandidateRecord],
    query: str,
    status_filter: str,
    search_mode: bool,
) -> list[CandidateRecord]:
    # Search results were already filtered server-side
    return [
        record for record in candidates
        if (search_mode or matches_query(record, query)) and matches_status(record, status_filter)
    ]


def normalize_status_filter(value: "str | CandidateStatus") -> str:
    if value == ALL_STATUSES:
        return ALL_STATUSES
    try:
        return coerce_status(value).value
    except InvalidStatusError as exc:
        raise InvalidStatusError(f"{exc} Use '{ALL_STATUSES}' to show every status.") from exc


class CandidateListController:
    """
    Owns the candidate list screen state.

    Page loads and searches share one monotonically increasing request token;
    a response is applied only if no newer page load or search has been issued
    since, so a slow older response never overwrites a newer one. The loading
    flags belong to the latest request that raised them.
    """

    def __init__(
        self,
        api: CandidateApi,
        notifier: Optional[Notifier] = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.api = api
        self.notifier = notifier or Notifier()
        self.page_size = page_size
        self.state = ListState()
        self._token = 0
        self._loading_owner = 0
        self._search_loading_owner = 0

    # Derived state

    @property
    def visible(self) -> list[CandidateRecord]:
        s = self.state
        return visible_candidates(s.candidates, s.query, s.status_filter, s.search_mode)

    @property
    def selected(self) -> Optional[CandidateRecord]:
        if self.state.selected_id is None:
            return None
        return self._find(self.state.selected_id)

    @property
    def busy(self) -> bool:
        return self.state.loading or self.state.search_loading

    @property
    def can_search(self) -> bool:
        return bool(self.state.query.strip()) and not self.busy

    def is_deleting(self, candidate_id: str) -> bool:
        return candidate_id in self.state.deleting_ids

    # Fetching

    def _issue_token(self) -> int:
        self._token += 1
        return self._token

    def _is_current(self, token: int) -> bool:
        return token == self._token

    async def _fetch_page(self, page: int) -> bool:
        token = self._issue_token()
        self._loading_owner = token
        self.state.loading = True
        try:
            result = await self.api.list_candidates(page, self.page_size)
        except RecruitApiError as exc:
            if self._is_current(token):
                logger.warning("[CandidateList] Failed to load page %s: %s", page, exc)
                self.state.error = FETCH_ERROR
            return False
        finally:
            if self._loading_owner == token:
                self.state.loading = False

        if not self._is_current(token):
            logger.debug("[CandidateList] Discarding stale page %s response", page)
            return False

        self.state.candidates = list(result.candidates)
        self.state.page = result.page
        self.state.total_pages = result.pages
        self.state.has_more = result.has_more
        self.state.search_mode = False
        self.state.searched_email = None
        self.state.error = None
        return True

    async def refresh(self) -> bool:
        """Re-run whatever produced the current list; the manual retry action."""
        if self.state.search_mode and self.state.searched_email:
            return await self._run_search(self.state.searched_email)
        return await self._fetch_page(self.state.page)

    async def load_page(self, page: int) -> bool:
        if page < 1 or page > self.state.total_pages or page == self.state.page:
            return False
        return await self._fetch_page(page)

    async def next_page(self) -> bool:
        return await self.load_page(self.state.page + 1)

    async def previous_page(self) -> bool:
        return await self.load_page(self.state.page - 1)

    def set_query(self, text: str) -> None:
        self.state.query = text

    async def search(self, query: Optional[str] = None) -> bool:
        if query is not None:
            self.state.query = query
        email = self.state.query.strip()
        if not email:
            return await self._fetch_page(1)
        return await self._run_search(email)

    async def _run_search(self, email: str) -> bool:
        token = self._issue_token()
        self._search_loading_owner = token
        self.state.search_loading = True
        try:
            results = await self.api.search_candidates(email)
        except RecruitApiError as exc:
            if self._is_current(token):
                logger.warning("[CandidateList] Search for %r failed: %s", email, exc)
                self.state.error = SEARCH_ERROR
            return False
        finally:
            if self._search_loading_owner == token:
                self.state.search_loading = False

        if not self._is_current(token):
            logger.debug("[CandidateList] Discarding stale search response for %r", email)
            return False

        self.state.candidates = list(results)
        self.state.page = 1
        self.state.total_pages = 1
        self.state.has_more = False
        self.state.search_mode = True
        self.state.searched_email = email
        self.state.error = None
        return True

    async def clear_search(self) -> bool:
        self.state.query = ""
        return await self._fetch_page(1)

    # Local-only mutations

    def set_status_filter(self, status: "str | CandidateStatus") -> None:
        self.state.status_filter = normalize_status_filter(status)

    def _find(self, candidate_id: str) -> Optional[CandidateRecord]:
        for record in self.state.candidates:
            if record.id == candidate_id:
                return record
        return None

    def change_status(self, candidate_id: str, status: "str | CandidateStatus") -> bool:
        """Annotate a candidate's status for this session; nothing is sent to the API."""
        new_status = coerce_status(status)
        for index, record in enumerate(self.state.candidates):
            if record.id == candidate_id:
                self.state.candidates[index] = record.model_copy(update={"status": new_status})
                self.notifier.notify(
                    "Status updated",
                    f"{record.full_name or 'Candidate'} is now {STATUS_LABELS[new_status]}.",
                )
                return True
        logger.warning("[CandidateList] change_status: no candidate with id %s on this page", candidate_id)
        return False

    def select_candidate(self, candidate_id: str) -> Optional[CandidateRecord]:
        record = self._find(candidate_id)
        self.state.selected_id = record.id if record else None
        return record

    def clear_selection(self) -> None:
        self.state.selected_id = None

    # Deletes

    async def delete_candidate(self, candidate_id: str) -> bool:
        if candidate_id in self.state.deleting_ids:
            return False
        record = self._find(candidate_id)
        if record is None:
            return False
        name = record.full_name or "Candidate"

        self.state.deleting_ids.add(candidate_id)
        try:
            result = await self.api.delete_candidate(candidate_id)
        except RecruitApiError as exc:
            logger.warning("[CandidateList] Delete of %s failed: %s", candidate_id, exc)
            self.notifier.error("Delete failed", exc.server_message or DELETE_ERROR)
            return False
        finally:
            self.state.deleting_ids.discard(candidate_id)

        if not result.success:
            logger.warning("[CandidateList] Delete of %s rejected: %s", candidate_id, result.message)
            self.notifier.error("Delete failed", result.message or DELETE_ERROR)
            return False

        self.state.candidates = [c for c in self.state.candidates if c.id != candidate_id]
        if self.state.selected_id == candidate_id:
            self.state.selected_id = None
        self.notifier.notify("Candidate deleted", f"{name} has been removed.")
        return True
