"""Pure projections of the candidate list state into displayable pieces."""

from dataclasses import dataclass
from typing import Optional

from ..models.candidate import STATUS_LABELS, CandidateRecord
from ..services.candidate_list import CandidateListController, ListState

TECHNICAL_SKILL_PREVIEW = 5
SOFT_SKILL_PREVIEW = 2


@dataclass(frozen=True)
class CandidateRow:
    id: str
    full_name: str
    email: str
    phone: str
    location: Optional[str]
    current_title: Optional[str]
    applied_role: Optional[str]
    technical_skills: tuple[str, ...]
    soft_skills: tuple[str, ...]
    has_more_skills: bool
    status: str
    status_label: str
    delete_disabled: bool


@dataclass(frozen=True)
class PageControl:
    label: str
    page: int
    disabled: bool
    active: bool = False


@dataclass(frozen=True)
class EmptyState:
    title: str
    message: str
    show_clear_search: bool


@dataclass(frozen=True)
class CandidateDetail:
    title: str
    contact: list[tuple[str, str]]
    professional: list[tuple[str, str]]
    certifications: tuple[str, ...]
    summary: Optional[str]
    technical_skills: tuple[str, ...]
    soft_skills: tuple[str, ...]
    work_experience: list[dict[str, Optional[str]]]


def candidate_row(record: CandidateRecord, *, deleting: bool = False) -> CandidateRow:
    personal = record.personal_info
    return CandidateRow(
        id=record.id,
        full_name=personal.full_name,
        email=personal.email,
        phone=personal.phone,
        location=personal.location,
        current_title=record.professional_info.current_title,
        applied_role=record.applied_role,
        technical_skills=tuple(record.technical_skills[:TECHNICAL_SKILL_PREVIEW]),
        soft_skills=tuple(record.soft_skills[:SOFT_SKILL_PREVIEW]),
        has_more_skills=(
            len(record.technical_skills) > TECHNICAL_SKILL_PREVIEW
            or len(record.soft_skills) > SOFT_SKILL_PREVIEW
        ),
        status=record.status.value,
        status_label=STATUS_LABELS[record.status],
        delete_disabled=deleting,
    )


def candidate_rows(controller: CandidateListController) -> list[CandidateRow]:
    return [
        candidate_row(record, deleting=controller.is_deleting(record.id))
        for record in controller.visible
    ]


def header_summary(visible_count: int, total_count: int) -> str:
    plural = "s" if total_count != 1 else ""
    return f"{visible_count} of {total_count} candidate{plural}"


def pagination_controls(state: ListState) -> list[PageControl]:
    """Previous, one control per page, Next. Empty while searching or on a single page."""
    if state.search_mode or state.total_pages <= 1:
        return []
    controls = [PageControl("Previous", state.page - 1, disabled=state.page == 1 or state.loading)]
    for number in range(1, state.total_pages + 1):
        controls.append(
            PageControl(str(number), number, disabled=state.loading, active=number == state.page)
        )
    controls.append(
        PageControl("Next", state.page + 1, disabled=state.page == state.total_pages or state.loading)
    )
    return controls


def empty_state(state: ListState, visible_count: int) -> Optional[EmptyState]:
    if visible_count or state.loading or state.error:
        return None
    if state.query:
        return EmptyState(
            title="No candidates found",
            message="Try adjusting your search terms or clear the search to see all candidates.",
            show_clear_search=True,
        )
    return EmptyState(
        title="No candidates uploaded yet",
        message="Upload candidate resumes to start building your database.",
        show_clear_search=False,
    )


def candidate_detail(record: CandidateRecord) -> CandidateDetail:
    personal = record.personal_info
    professional = record.professional_info

    contact = [("Email", personal.email), ("Phone", personal.phone)]
    if personal.location:
        contact.append(("Location", personal.location))
    if personal.linkedin:
        contact.append(("LinkedIn", personal.linkedin))
    if record.applied_role:
        contact.append(("Role Applied", record.applied_role))

    details = []
    if professional.current_title:
        details.append(("Current Title", professional.current_title))
    if professional.years_of_experience:
        details.append(("Experience", professional.years_of_experience))
    if professional.education:
        details.append(("Education", professional.education))

    return CandidateDetail(
        title=f"{personal.full_name} - Resume Details",
        contact=contact,
        professional=details,
        certifications=tuple(professional.certifications),
        summary=record.professional_summary,
        technical_skills=tuple(record.technical_skills),
        soft_skills=tuple(record.soft_skills),
        work_experience=[
            {
                "title": exp.title,
                "company": exp.company,
                "years": exp.years,
                "description": exp.description,
            }
            for exp in record.work_experience
        ],
    )
