import asyncio

from recruit_console.models.candidate import CandidatePage, CandidateRecord, DeleteResult
from recruit_console.models.interview import GeneratedQuestion, Role
from recruit_console.services.candidate_list import CandidateListController, ListState
from recruit_console.services.interview_generator import InterviewGeneratorController
from recruit_console.views.candidates import (
    candidate_detail,
    candidate_row,
    candidate_rows,
    empty_state,
    header_summary,
    pagination_controls,
)
from recruit_console.views.interview import configuration_panel, question_cards, results_badge


class _StaticCandidateApi:
    def __init__(self, records):
        self.records = records

    async def list_candidates(self, page, limit):
        return CandidatePage(candidates=self.records, page=page, pages=1)

    async def search_candidates(self, email):
        return []

    async def delete_candidate(self, candidate_id):
        return DeleteResult(success=True)


def test_row_previews_skills(candidate_factory):
    record = CandidateRecord.model_validate(candidate_factory(
        1,
        technicalSkills=["A", "B", "C", "D", "E", "F"],
        softSkills=["X"],
        status="hold",
    ))
    row = candidate_row(record)

    assert row.technical_skills == ("A", "B", "C", "D", "E")
    assert row.soft_skills == ("X",)
    assert row.has_more_skills is True
    assert row.status_label == "Hold"
    assert row.delete_disabled is False


def test_rows_follow_visible_subset_and_delete_flags(candidates):
    controller = CandidateListController(_StaticCandidateApi(candidates[:3]))
    asyncio.run(controller.refresh())
    controller.state.deleting_ids.add("cand-2")
    controller.set_query("candidate2")

    rows = candidate_rows(controller)
    assert [r.id for r in rows] == ["cand-2"]
    assert rows[0].delete_disabled is True
    assert header_summary(len(rows), len(controller.state.candidates)) == "1 of 3 candidates"
    assert header_summary(1, 1) == "1 of 1 candidate"


def test_pagination_controls():
    state = ListState(page=1, total_pages=3)
    controls = pagination_controls(state)

    assert [c.label for c in controls] == ["Previous", "1", "2", "3", "Next"]
    assert controls[0].disabled is True
    assert controls[-1].disabled is False
    assert [c.active for c in controls[1:4]] == [True, False, False]

    state.page = 3
    assert pagination_controls(state)[-1].disabled is True

    state.loading = True
    assert all(c.disabled for c in pagination_controls(state))


def test_pagination_hidden_in_search_mode_or_single_page():
    assert pagination_controls(ListState(page=1, total_pages=3, search_mode=True)) == []
    assert pagination_controls(ListState(page=1, total_pages=1)) == []


def test_empty_state_messages():
    assert empty_state(ListState(), 2) is None
    assert empty_state(ListState(loading=True), 0) is None
    assert empty_state(ListState(error="Failed to fetch candidates."), 0) is None

    searching = empty_state(ListState(query="zed"), 0)
    assert searching.title == "No candidates found"
    assert searching.show_clear_search is True

    fresh = empty_state(ListState(), 0)
    assert fresh.title == "No candidates uploaded yet"
    assert fresh.show_clear_search is False


def test_candidate_detail(candidate_factory):
    record = CandidateRecord.model_validate(candidate_factory(
        4,
        personalInfo={"fullName": "Lin", "email": "lin@example.com", "phone": "1", "location": "Oslo"},
        professionalInfo={"currentTitle": "SRE", "certifications": ["CKA"]},
        roleApplied={"role": "Platform"},
        workExperience=[{"title": "SRE", "company": "Acme", "description": "On-call"}],
    ))
    detail = candidate_detail(record)

    assert detail.title == "Lin - Resume Details"
    assert ("Location", "Oslo") in detail.contact
    assert ("Role Applied", "Platform") in detail.contact
    assert detail.professional == [("Current Title", "SRE")]
    assert detail.certifications == ("CKA",)
    assert detail.work_experience[0]["company"] == "Acme"


def test_question_cards_show_answer_only_when_expanded():
    controller = InterviewGeneratorController(api=None)
    controller.state.questions = [
        GeneratedQuestion(question="Q1", complexity="Easy", expected_answer="A1"),
        GeneratedQuestion(question="Q2", complexity="Hard", expected_answer="A2"),
    ]
    controller.toggle_question_expansion(1)

    cards = question_cards(controller.state)
    assert [(c.number, c.expanded, c.expected_answer) for c in cards] == [(1, False, None), (2, True, "A2")]
    assert results_badge(controller.state) == "2 questions"

    controller.reset()
    assert results_badge(controller.state) is None


def test_configuration_panel():
    controller = InterviewGeneratorController(api=None)
    controller.state.roles = [Role(id="r1", role="Backend", skills=["Python", "SQL"])]
    controller.select_role("r1")
    controller.toggle_skill("SQL")
    controller.set_complexity(80)
    controller.set_question_count(1)

    panel = configuration_panel(controller)
    assert panel.roles == [("r1", "Backend")]
    assert [(s.skill, s.selected) for s in panel.skills] == [("Python", False), ("SQL", True)]
    assert panel.selected_skill_count == 1
    assert (panel.complexity_label, panel.complexity_level) == ("Hard", 4)
    assert panel.question_count_label == "Quick interview"
    assert panel.decrement_disabled is True
    assert panel.increment_disabled is False
    assert panel.generate_disabled is False
    assert panel.generate_label == "Generate Interview"
