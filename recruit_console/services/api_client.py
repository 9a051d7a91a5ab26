"""Async client for the recruiting dashboard HTTP API."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..config import get_settings
from ..models.candidate import CandidatePage, CandidateRecord, DeleteResult
from ..models.interview import GeneratedQuestion, GenerationRequest, Role

logger = logging.getLogger(__name__)


class RecruitApiError(Exception):
    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        # Only set when the API itself explained the failure
        self.server_message = server_message


def _server_message(response: httpx.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    elif isinstance(error, str) and error.strip():
        return error.strip()
    message = payload.get("message")
    if isinstance(message, str) and message.strip():
        return message.strip()
    return None


def _extract_response_error(response: httpx.Response) -> str:
    return _server_message(response) or (response.text or f"HTTP {response.status_code}").strip()


class RecruitApiClient:
    """Thin wrapper over the candidate, role-skill and question endpoints.

    A fresh ``httpx.AsyncClient`` is opened per call. ``transport`` lets callers
    (and tests) swap the network layer without touching the request code.
    """

    CANDIDATES_PATH = "/candidate-resumes"
    SEARCH_PATH = "/candidate-resumes/search"
    ROLE_SKILLS_PATH = "/candidate-role-skills"
    GENERATE_PATH = "/interview-questions/generate"

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if base_url is None:
            settings = get_settings()
            base_url = settings.api_base_url
            timeout = settings.request_timeout if timeout is None else timeout
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("[RecruitApi] %s %s failed: %s", method, path, exc)
            raise RecruitApiError("transport", f"Request failed: {exc}") from exc

        if response.status_code >= 400:
            message = _extract_response_error(response)
            logger.warning(
                "[RecruitApi] %s %s returned %s: %s",
                method, path, response.status_code, message,
            )
            raise RecruitApiError(
                "http_status",
                message,
                status_code=response.status_code,
                server_message=_server_message(response),
            )

        try:
            return response.json()
        except ValueError as exc:
            raise RecruitApiError(
                "bad_response",
                f"Response from {path} is not valid JSON",
                status_code=response.status_code,
            ) from exc

    async def list_candidates(self, page: int, limit: int) -> CandidatePage:
        payload = await self._request(
            "GET", self.CANDIDATES_PATH, params={"page": page, "limit": limit}
        )
        if not isinstance(payload, dict):
            raise RecruitApiError("bad_response", "Candidate listing must be a JSON object")

        pagination = payload.get("pagination") or {}
        try:
            candidates = [CandidateRecord.model_validate(item) for item in payload.get("data") or []]
            return CandidatePage(
                candidates=candidates,
                page=pagination.get("page") or 1,
                pages=pagination.get("pages") or 1,
            )
        except (ValidationError, AttributeError, TypeError) as exc:
            raise RecruitApiError("bad_response", f"Malformed candidate listing: {exc}") from exc

    async def search_candidates(self, email: str) -> list[CandidateRecord]:
        payload = await self._request("POST", self.SEARCH_PATH, json={"email": email})
        if not isinstance(payload, dict):
            raise RecruitApiError("bad_response", "Candidate search must return a JSON object")
        try:
            return [CandidateRecord.model_validate(item) for item in payload.get("data") or []]
        except (ValidationError, TypeError) as exc:
            raise RecruitApiError("bad_response", f"Malformed search result: {exc}") from exc

    async def delete_candidate(self, candidate_id: str) -> DeleteResult:
        payload = await self._request("DELETE", f"{self.CANDIDATES_PATH}/{quote(candidate_id, safe='')}")
        if not isinstance(payload, dict):
            raise RecruitApiError("bad_response", "Delete response must be a JSON object")
        try:
            return DeleteResult.model_validate(payload)
        except ValidationError as exc:
            raise RecruitApiError("bad_response", f"Malformed delete response: {exc}") from exc

    async def list_roles(self) -> list[Role]:
        payload = await self._request("GET", self.ROLE_SKILLS_PATH)
        data = payload.get("data", payload) if isinstance(payload, dict) else payload
        if not isinstance(data, list):
            data = []
        try:
            return [Role.model_validate(item) for item in data]
        except ValidationError as exc:
            raise RecruitApiError("bad_response", f"Malformed role catalog: {exc}") from exc

    async def generate_questions(self, request: GenerationRequest) -> list[GeneratedQuestion]:
        # Every field travels as a multipart part so the body is multipart
        # even without a resume attached.
        files: list[tuple[str, tuple[Optional[str], bytes] | tuple[str, bytes, str]]] = [
            ("role", (None, request.role.encode())),
            ("skills", (None, json.dumps(list(request.skills)).encode())),
            ("questionComplexity", (None, str(request.complexity).encode())),
            ("numberOfQuestions", (None, str(request.question_count).encode())),
        ]
        if request.file is not None:
            files.append(
                ("pdf", (request.file.filename, request.file.content, request.file.content_type))
            )

        payload = await self._request("POST", self.GENERATE_PATH, files=files)
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise RecruitApiError("bad_response", "Question generation response has no data object")
        try:
            return [GeneratedQuestion.model_validate(q) for q in data.get("questions") or []]
        except (ValidationError, TypeError) as exc:
            raise RecruitApiError("bad_response", f"Malformed generated questions: {exc}") from exc
