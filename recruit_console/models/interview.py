from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


COMPLEXITY_MIN = 0
COMPLEXITY_MAX = 100
DEFAULT_COMPLEXITY = 50

QUESTION_COUNT_MIN = 1
QUESTION_COUNT_MAX = 20
DEFAULT_QUESTION_COUNT = 10


class Role(BaseModel):
    """A role from the role/skill catalog and the skills it allows."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    role: str
    skills: list[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v


class GeneratedQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question: str
    type: str = ""
    complexity: str = ""
    expected_answer: str = Field(default="", alias="expectedAnswer")
    skills: tuple[str, ...] = ()

    @field_validator("type", "complexity", "expected_answer", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("skills", mode="before")
    @classmethod
    def _none_to_tuple(cls, v: Any) -> Any:
        return () if v is None else v


@dataclass(frozen=True)
class UploadedFile:
    """A resume picked by the user; sent only when questions are generated."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class GenerationRequest:
    role: str
    skills: tuple[str, ...]
    complexity: int
    question_count: int
    file: Optional[UploadedFile] = None
