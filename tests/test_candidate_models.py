from datetime import timedelta

import pytest

from recruit_console.models.candidate import (
    CandidateRecord,
    CandidateStatus,
    InvalidStatusError,
    coerce_status,
)


def test_missing_status_defaults_to_in_progress(candidate_factory):
    record = CandidateRecord.model_validate(candidate_factory(1))
    assert record.status == CandidateStatus.IN_PROGRESS


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, CandidateStatus.IN_PROGRESS),
        ("", CandidateStatus.IN_PROGRESS),
        ("archived", CandidateStatus.IN_PROGRESS),
        ("Hold", CandidateStatus.HOLD),
        (" accepted ", CandidateStatus.ACCEPTED),
        ("rejected", CandidateStatus.REJECTED),
    ],
)
def test_status_is_always_one_of_four(candidate_factory, raw, expected):
    record = CandidateRecord.model_validate(candidate_factory(1, status=raw))
    assert record.status == expected


def test_camel_case_payload_is_parsed(candidate_factory):
    record = CandidateRecord.model_validate(candidate_factory(
        3,
        personalInfo={"fullName": "Ada", "email": "ada@example.com", "phone": None, "linkedin": None},
        professionalInfo={"yearsOfExperience": 7, "education": "BSc", "certifications": None},
        roleApplied={"role": "Data Engineer", "requestedSkills": ["SQL"]},
        professionalSummary="Builds pipelines.",
        workExperience=[{"title": "Engineer", "company": "Acme", "years": None, "description": "ETL"}],
        technicalSkills=None,
    ))

    assert record.id == "cand-3"
    assert record.full_name == "Ada"
    assert record.personal_info.phone == ""
    assert record.professional_info.years_of_experience == "7"
    assert record.professional_info.certifications == []
    assert record.applied_role == "Data Engineer"
    assert record.work_experience[0].company == "Acme"
    assert record.technical_skills == []
    assert record.created_at.utcoffset() == timedelta(0)


def test_coerce_status_rejects_unknown_values():
    assert coerce_status("hold") is CandidateStatus.HOLD
    assert coerce_status(CandidateStatus.ACCEPTED) is CandidateStatus.ACCEPTED
    with pytest.raises(InvalidStatusError, match="Allowed statuses: in-progress, hold, accepted, rejected"):
        coerce_status("interviewing")
