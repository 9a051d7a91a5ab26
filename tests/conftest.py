import pytest

from recruit_console.models.candidate import CandidateRecord


def make_candidate(index: int, **overrides) -> dict:
    payload = {
        "_id": f"cand-{index}",
        "personalInfo": {
            "fullName": f"Candidate {index}",
            "email": f"candidate{index}@example.com",
            "phone": f"555-010{index % 10}",
        },
        "professionalInfo": {"currentTitle": "Engineer"},
        "technicalSkills": ["Python"],
        "softSkills": ["Communication"],
        "createdAt": "2025-03-01T10:00:00.000Z",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def candidate_payloads() -> list[dict]:
    return [make_candidate(i) for i in range(1, 13)]


@pytest.fixture
def candidates(candidate_payloads) -> list[CandidateRecord]:
    return [CandidateRecord.model_validate(p) for p in candidate_payloads]


@pytest.fixture
def candidate_factory():
    return make_candidate
