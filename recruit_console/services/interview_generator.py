"""Interview generator screen: role/skill configuration and question generation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Protocol

from ..models.interview import (
    COMPLEXITY_MAX,
    COMPLEXITY_MIN,
    DEFAULT_COMPLEXITY,
    DEFAULT_QUESTION_COUNT,
    QUESTION_COUNT_MAX,
    QUESTION_COUNT_MIN,
    GeneratedQuestion,
    GenerationRequest,
    Role,
    UploadedFile,
)
from .api_client import RecruitApiError
from .notifications import Notifier

logger = logging.getLogger(__name__)

CATALOG_ERROR = "Failed to fetch roles. Please check if the API server is running."


class InterviewApi(Protocol):
    async def list_roles(self) -> list[Role]: ...

    async def generate_questions(self, request: GenerationRequest) -> list[GeneratedQuestion]: ...


def complexity_label(value: int) -> str:
    if value <= 25:
        return "Easy"
    if value <= 50:
        return "Medium-Low"
    if value <= 75:
        return "Medium-High"
    return "Hard"


def complexity_description(value: int) -> str:
    if value <= 25:
        return "Basic concepts and straightforward implementations"
    if value <= 50:
        return "Intermediate concepts with some complexity"
    if value <= 75:
        return "Advanced concepts requiring deeper understanding"
    return "Expert-level with edge cases and complex scenarios"


def complexity_level(value: int) -> int:
    return math.ceil(value / 25)


def question_count_label(count: int) -> str:
    if count <= 5:
        return "Quick interview"
    if count <= 10:
        return "Standard interview"
    if count <= 15:
        return "Comprehensive interview"
    return "Extended assessment"


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass
class GeneratorState:
    roles: list[Role] = field(default_factory=list)
    catalog_loading: bool = True
    catalog_error: Optional[str] = None

    selected_role_id: str = ""
    selected_skills: list[str] = field(default_factory=list)
    complexity: int = DEFAULT_COMPLEXITY
    question_count: int = DEFAULT_QUESTION_COUNT
    uploaded_file: Optional[UploadedFile] = None

    questions: list[GeneratedQuestion] = field(default_factory=list)
    generating: bool = False
    expanded: set[int] = field(default_factory=set)


class InterviewGeneratorController:
    def __init__(self, api: InterviewApi, notifier: Optional[Notifier] = None):
        self.api = api
        self.notifier = notifier or Notifier()
        self.state = GeneratorState()
        # Bumped by generate() and reset(); a response only lands if unchanged
        self._generation = 0

    # Catalog

    async def load_catalog(self) -> bool:
        self.state.catalog_loading = True
        self.state.catalog_error = None
        try:
            self.state.roles = await self.api.list_roles()
            return True
        except RecruitApiError as exc:
            logger.warning("[InterviewGenerator] Failed to fetch roles: %s", exc)
            self.state.catalog_error = CATALOG_ERROR
            self.notifier.error("Error", "Failed to fetch roles. Please try again.")
            return False
        finally:
            self.state.catalog_loading = False

    async def retry_catalog(self) -> bool:
        return await self.load_catalog()

    @property
    def selected_role(self) -> Optional[Role]:
        for role in self.state.roles:
            if role.id == self.state.selected_role_id:
                return role
        return None

    @property
    def available_skills(self) -> list[str]:
        role = self.selected_role
        return list(role.skills) if role else []

    @property
    def can_generate(self) -> bool:
        return bool(self.state.selected_role_id and self.state.selected_skills) and not self.state.generating

    # Configuration

    def select_role(self, role_id: str) -> None:
        """Switch roles, keeping only the selected skills the new role also offers."""
        self.state.selected_role_id = role_id
        allowed = set(self.available_skills)
        self.state.selected_skills = [s for s in self.state.selected_skills if s in allowed]

    def toggle_skill(self, skill: str) -> bool:
        """Returns True when the skill ends up selected."""
        if skill in self.state.selected_skills:
            self.state.selected_skills = [s for s in self.state.selected_skills if s != skill]
            return False
        if skill not in self.available_skills:
            logger.debug("[InterviewGenerator] Ignoring skill %r not offered by the selected role", skill)
            return False
        self.state.selected_skills = [*self.state.selected_skills, skill]
        return True

    def set_complexity(self, value: int) -> int:
        self.state.complexity = _clamp(int(value), COMPLEXITY_MIN, COMPLEXITY_MAX)
        return self.state.complexity

    def set_question_count(self, count: int) -> int:
        self.state.question_count = _clamp(int(count), QUESTION_COUNT_MIN, QUESTION_COUNT_MAX)
        return self.state.question_count

    def step_question_count(self, delta: int) -> int:
        return self.set_question_count(self.state.question_count + delta)

    def upload_file(self, file: UploadedFile) -> None:
        self.state.uploaded_file = file
        self.notifier.notify("Resume uploaded", f"{file.filename} has been uploaded successfully.")

    def build_request(self) -> GenerationRequest:
        role = self.selected_role
        return GenerationRequest(
            role=role.role if role else "",
            skills=tuple(self.state.selected_skills),
            complexity=self.state.complexity,
            question_count=self.state.question_count,
            file=self.state.uploaded_file,
        )

    # Generation

    async def generate(self) -> Optional[list[GeneratedQuestion]]:
        if self.state.generating:
            return None
        if not self.state.selected_role_id or not self.state.selected_skills:
            self.notifier.error("Missing requirements", "Please select a role and at least one skill.")
            return None

        request = self.build_request()
        self._generation += 1
        generation = self._generation
        self.state.generating = True
        try:
            questions = await self.api.generate_questions(request)
        except RecruitApiError as exc:
            logger.warning("[InterviewGenerator] Question generation failed: %s", exc)
            self.notifier.error("Error", "Failed to generate questions. Please try again.")
            return None
        finally:
            self.state.generating = False

        if generation != self._generation:
            logger.debug("[InterviewGenerator] Discarding questions generated before a reset")
            return None

        self.state.questions = list(questions)
        self.state.expanded = set()
        self.notifier.notify(
            "Questions generated",
            f"{len(self.state.questions)} questions have been generated based on your selections.",
        )
        return self.state.questions

    def toggle_question_expansion(self, index: int) -> bool:
        if index in self.state.expanded:
            self.state.expanded.discard(index)
            return False
        self.state.expanded.add(index)
        return True

    def reset(self) -> None:
        """Back to the initial configuration; the role catalog is kept."""
        self._generation += 1
        self.state.uploaded_file = None
        self.state.selected_role_id = ""
        self.state.selected_skills = []
        self.state.complexity = DEFAULT_COMPLEXITY
        self.state.question_count = DEFAULT_QUESTION_COUNT
        self.state.questions = []
        self.state.expanded = set()
