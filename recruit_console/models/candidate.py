from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CandidateStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    HOLD = "hold"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


DEFAULT_STATUS = CandidateStatus.IN_PROGRESS

STATUS_LABELS: dict[CandidateStatus, str] = {
    CandidateStatus.IN_PROGRESS: "In Progress",
    CandidateStatus.HOLD: "Hold",
    CandidateStatus.ACCEPTED: "Accepted",
    CandidateStatus.REJECTED: "Rejected",
}


class InvalidStatusError(ValueError):
    """Raised when a status outside the four candidate statuses is requested."""


def coerce_status(value: "str | CandidateStatus") -> CandidateStatus:
    if isinstance(value, CandidateStatus):
        return value
    try:
        return CandidateStatus(value)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in CandidateStatus)
        raise InvalidStatusError(
            f"Unknown candidate status '{value}'. Allowed statuses: {allowed}."
        ) from exc


class _ApiModel(BaseModel):
    """Base for payloads that arrive in camelCase from the recruiting API."""
    model_config = ConfigDict(populate_by_name=True)


class PersonalInfo(_ApiModel):
    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    phone: str = ""
    location: Optional[str] = None
    linkedin: Optional[str] = None

    @field_validator("full_name", "email", "phone", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class ProfessionalInfo(_ApiModel):
    current_title: Optional[str] = Field(default=None, alias="currentTitle")
    years_of_experience: Optional[str] = Field(default=None, alias="yearsOfExperience")
    education: Optional[str] = None
    certifications: list[str] = Field(default_factory=list)

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _stringify_years(cls, v: Any) -> Any:
        # Parsed resumes report experience as either "5 years" or 5
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("certifications", mode="before")
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v


class RoleApplied(_ApiModel):
    role: Optional[str] = None
    requested_skills: list[str] = Field(default_factory=list, alias="requestedSkills")

    @field_validator("requested_skills", mode="before")
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v


class WorkExperience(_ApiModel):
    title: Optional[str] = None
    company: Optional[str] = None
    years: Optional[str] = None
    description: Optional[str] = None


class CandidateRecord(_ApiModel):
    """A parsed resume as returned by the candidate-resumes endpoints."""

    id: str = Field(alias="_id")
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    professional_info: ProfessionalInfo = Field(default_factory=ProfessionalInfo, alias="professionalInfo")
    role_applied: Optional[RoleApplied] = Field(default=None, alias="roleApplied")
    professional_summary: Optional[str] = Field(default=None, alias="professionalSummary")
    work_experience: list[WorkExperience] = Field(default_factory=list, alias="workExperience")
    technical_skills: list[str] = Field(default_factory=list, alias="technicalSkills")
    soft_skills: list[str] = Field(default_factory=list, alias="softSkills")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    status: CandidateStatus = DEFAULT_STATUS

    @field_validator("work_experience", "technical_skills", "soft_skills", mode="before")
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, v: Any) -> CandidateStatus:
        # Missing or unrecognised statuses fall back to in-progress
        if isinstance(v, CandidateStatus):
            return v
        if isinstance(v, str):
            try:
                return CandidateStatus(v.strip().lower())
            except ValueError:
                pass
        return DEFAULT_STATUS

    @property
    def full_name(self) -> str:
        return self.personal_info.full_name

    @property
    def applied_role(self) -> Optional[str]:
        return self.role_applied.role if self.role_applied else None


class CandidatePage(BaseModel):
    """One page of the candidate listing."""
    candidates: list[CandidateRecord]
    page: int = 1
    pages: int = 1

    @property
    def has_more(self) -> bool:
        return self.page < self.pages


class DeleteResult(BaseModel):
    success: bool
    message: Optional[str] = None
