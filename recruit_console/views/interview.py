"""Pure projections of the interview generator state."""

from dataclasses import dataclass
from typing import Optional

from ..models.interview import QUESTION_COUNT_MAX, QUESTION_COUNT_MIN
from ..services.interview_generator import (
    GeneratorState,
    InterviewGeneratorController,
    complexity_description,
    complexity_label,
    complexity_level,
    question_count_label,
)


@dataclass(frozen=True)
class QuestionCard:
    number: int
    question: str
    complexity: str
    expanded: bool
    # Only filled in while expanded
    expected_answer: Optional[str]


@dataclass(frozen=True)
class SkillChip:
    skill: str
    selected: bool


@dataclass(frozen=True)
class ConfigurationPanel:
    uploaded_filename: Optional[str]
    roles: list[tuple[str, str]]
    selected_role_id: str
    skills: list[SkillChip]
    selected_skill_count: int
    complexity: int
    complexity_label: str
    complexity_description: str
    complexity_level: int
    question_count: int
    question_count_label: str
    decrement_disabled: bool
    increment_disabled: bool
    generate_disabled: bool
    generate_label: str


def question_cards(state: GeneratorState) -> list[QuestionCard]:
    return [
        QuestionCard(
            number=index + 1,
            question=q.question,
            complexity=q.complexity,
            expanded=index in state.expanded,
            expected_answer=q.expected_answer if index in state.expanded else None,
        )
        for index, q in enumerate(state.questions)
    ]


def results_badge(state: GeneratorState) -> Optional[str]:
    if not state.questions:
        return None
    return f"{len(state.questions)} questions"


def configuration_panel(controller: InterviewGeneratorController) -> ConfigurationPanel:
    state = controller.state
    return ConfigurationPanel(
        uploaded_filename=state.uploaded_file.filename if state.uploaded_file else None,
        roles=[(role.id, role.role) for role in state.roles],
        selected_role_id=state.selected_role_id,
        skills=[
            SkillChip(skill, skill in state.selected_skills)
            for skill in controller.available_skills
        ],
        selected_skill_count=len(state.selected_skills),
        complexity=state.complexity,
        complexity_label=complexity_label(state.complexity),
        complexity_description=complexity_description(state.complexity),
        complexity_level=complexity_level(state.complexity),
        question_count=state.question_count,
        question_count_label=question_count_label(state.question_count),
        decrement_disabled=state.question_count <= QUESTION_COUNT_MIN,
        increment_disabled=state.question_count >= QUESTION_COUNT_MAX,
        generate_disabled=not controller.can_generate,
        generate_label="Generating Questions..." if state.generating else "Generate Interview",
    )
