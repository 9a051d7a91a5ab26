from .candidate import (
    CandidateRecord,
    CandidatePage,
    CandidateStatus,
    DeleteResult,
    InvalidStatusError,
    PersonalInfo,
    ProfessionalInfo,
    RoleApplied,
    WorkExperience,
    STATUS_LABELS,
    coerce_status,
)
from .interview import (
    GeneratedQuestion,
    GenerationRequest,
    Role,
    UploadedFile,
)

__all__ = [
    "CandidateRecord",
    "CandidatePage",
    "CandidateStatus",
    "DeleteResult",
    "InvalidStatusError",
    "PersonalInfo",
    "ProfessionalInfo",
    "RoleApplied",
    "WorkExperience",
    "STATUS_LABELS",
    "coerce_status",
    "GeneratedQuestion",
    "GenerationRequest",
    "Role",
    "UploadedFile",
]
