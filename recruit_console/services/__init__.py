from .api_client import RecruitApiClient, RecruitApiError
from .candidate_list import CandidateListController, ListState
from .interview_generator import InterviewGeneratorController, GeneratorState
from .notifications import Notification, Notifier

__all__ = [
    "RecruitApiClient",
    "RecruitApiError",
    "CandidateListController",
    "ListState",
    "InterviewGeneratorController",
    "GeneratorState",
    "Notification",
    "Notifier",
]
