"""
Profile Service Tests
Onboarding, recompute-on-edit, check-ins and mindset flows against the
in-memory record store.
"""

from datetime import date, datetime

import pytest

from conftest import make_log
from skinlogic.profile import (
    CoachReply,
    CoachToolCall,
    DailyAnalysisResult,
    InMemoryRecordStore,
    ProfileService,
    UserProfile,
    analyze_daily_photo,
    apply_scan_prefill,
)
from skinlogic.shared.errors import (
    MindsetNotStartedError,
    ProfileNotFoundError,
    QuestionnaireMissingError,
    QuizValidationError,
)


class FakeInflammationService:
    def __init__(self, score=60.0, fail=False):
        self.score = score
        self.fail = fail
        self.calls = []

    def analyze(self, image):
        self.calls.append(image)
        if self.fail:
            raise RuntimeError("vision backend unavailable")
        return DailyAnalysisResult(
            inflammation_score=self.score,
            status="Moderate",
            detected_locations=["Arms"],
            detected_symptoms=["Redness"],
            notes="Erythema with excoriation on the forearm.",
            explanation="The area is red with a few scratch marks.",
        )


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def service(store):
    return ProfileService(store, inflammation_service=FakeInflammationService())


@pytest.fixture
def onboarded(service, sam_questionnaire):
    service.complete_onboarding("user-1", sam_questionnaire)
    return service


# ============================================================
# ONBOARDING
# ============================================================

class TestOnboarding:
    def test_profile_stored_with_computed(self, service, store, sam_questionnaire):
        profile = service.complete_onboarding("user-1", sam_questionnaire)
        assert store.get_profile("user-1") == profile
        assert profile.computed.severity_class == "Moderate"
        assert profile.name == "Sam Doe"
        assert profile.skin_type == "Dry/Cracked"

    def test_starter_formula(self, service, sam_questionnaire):
        profile = service.complete_onboarding("user-1", sam_questionnaire)
        formula = profile.current_formula
        assert formula.base == "Vegan Rice Protein"
        assert formula.flavor == "Baobab Vanilla"
        assert formula.name == "Sam's Formula"
        assert [a.name for a in formula.additives] == profile.computed.supplement_protocol.phase1
        assert {a.dose for a in formula.additives} == {"Clinical"}

    def test_custom_blend_name(self, service, sam_questionnaire):
        profile = service.complete_onboarding("user-1", sam_questionnaire, blend_name="Calm Skin")
        assert profile.current_formula.name == "Calm Skin"
        assert profile.custom_blend_name == "Calm Skin"


class TestUpdateQuestionnaire:
    def test_recomputes_wholesale(self, onboarded, sam_questionnaire):
        calmer = sam_questionnaire.model_copy(update={"itch_score": 2, "perceived_stress": "Low"})
        profile = onboarded.update_questionnaire("user-1", calmer)
        assert profile.questionnaire.itch_score == 2
        assert profile.computed.psychoderm_profile == "Resilient"
        assert "Ashwagandha" not in profile.computed.supplement_protocol.phase1

    def test_formula_kept(self, onboarded, sam_questionnaire):
        before = onboarded.store.get_profile("user-1").current_formula
        after = onboarded.update_questionnaire("user-1", sam_questionnaire).current_formula
        assert after == before

    def test_unknown_user(self, service, sam_questionnaire):
        with pytest.raises(ProfileNotFoundError):
            service.update_questionnaire("ghost", sam_questionnaire)


class TestExplain:
    def test_one_entry_per_ingredient(self, onboarded):
        explanations = onboarded.explain("user-1")
        protocol = onboarded.store.get_profile("user-1").computed.supplement_protocol
        assert len(explanations) == len(protocol.phase1) + len(protocol.phase2) + len(protocol.phase3)

    def test_requires_questionnaire(self, service, store):
        store.upsert_profile("user-2", UserProfile(user_id="user-2"))
        with pytest.raises(QuestionnaireMissingError):
            service.explain("user-2")


# ============================================================
# CHECK-INS
# ============================================================

class TestCheckIn:
    def test_photo_scored_by_service(self, onboarded):
        log = onboarded.record_check_in("user-1", make_log(0, itch=6, photo_url="day0.jpg"))
        assert log.ai_redness_score == 60.0
        assert log.ai_locations == ["Arms"]
        assert onboarded.inflammation_service.calls == ["day0.jpg"]

    def test_ai_notes_fill_empty_notes(self, onboarded):
        log = onboarded.record_check_in("user-1", make_log(0, itch=6, photo_url="day0.jpg"))
        assert log.notes == "Erythema with excoriation on the forearm."
        assert log.ai_explanation == "The area is red with a few scratch marks."
        assert onboarded.list_logs("user-1")[0].ai_explanation == log.ai_explanation

    def test_user_notes_win_over_ai_notes(self, onboarded):
        log = onboarded.record_check_in(
            "user-1", make_log(0, itch=6, photo_url="day0.jpg", notes="itchy after gym"),
        )
        assert log.notes == "itchy after gym"
        assert log.ai_explanation == "The area is red with a few scratch marks."

    def test_existing_score_kept(self, onboarded):
        log = onboarded.record_check_in(
            "user-1", make_log(0, itch=6, photo_url="day0.jpg", ai_redness_score=20),
        )
        assert log.ai_redness_score == 20
        assert onboarded.inflammation_service.calls == []

    def test_service_failure_saves_log_unscored(self, store, sam_questionnaire):
        service = ProfileService(store, inflammation_service=FakeInflammationService(fail=True))
        service.complete_onboarding("user-1", sam_questionnaire)
        log = service.record_check_in("user-1", make_log(0, itch=6, images=["a.jpg"]))
        assert log.ai_redness_score is None
        assert len(store.list_logs("user-1")) == 1

    def test_unknown_user(self, service):
        with pytest.raises(ProfileNotFoundError):
            service.record_check_in("ghost", make_log(0, itch=5))

    def test_trend_uses_sorted_history(self, onboarded):
        for day, itch in [(2, 4), (0, 8), (1, 6)]:
            onboarded.record_check_in("user-1", make_log(day, itch=itch))
        assert [log.id for log in onboarded.list_logs("user-1")] == ["log-0", "log-1", "log-2"]
        assert onboarded.get_trend("user-1").status == "Improving"
        assert onboarded.get_dashboard("user-1").log_count == 3

    def test_two_logs_calibrating(self, onboarded):
        onboarded.record_check_in("user-1", make_log(0, itch=8))
        onboarded.record_check_in("user-1", make_log(1, itch=2))
        assert onboarded.get_trend("user-1").status == "Calibrating"


# ============================================================
# MINDSET
# ============================================================

class TestMindsetFlow:
    def test_quiz_then_task(self, onboarded):
        mindset = onboarded.complete_quiz("user-1", {"feeling": "Ashamed"}, now=datetime(2026, 3, 2))
        assert mindset.assigned_module_id == "rebuild-identity"

        updated = onboarded.complete_task("user-1", date(2026, 3, 2))
        assert updated.current_day == 2
        assert onboarded.store.get_profile("user-1").mindset.streak == 1

    def test_retake_replaces_profile(self, onboarded):
        onboarded.complete_quiz("user-1", {"feeling": "Ashamed"})
        onboarded.complete_task("user-1", date(2026, 3, 2))
        mindset = onboarded.complete_quiz("user-1", {"feeling": "Angry"})
        assert mindset.assigned_module_id == "rewire-itch"
        assert mindset.streak == 0

    def test_onboarding_again_keeps_mindset(self, onboarded, sam_questionnaire):
        onboarded.complete_quiz("user-1", {"feeling": "Angry"})
        profile = onboarded.complete_onboarding("user-1", sam_questionnaire)
        assert profile.mindset is not None

    def test_invalid_answers(self, onboarded):
        with pytest.raises(QuizValidationError):
            onboarded.complete_quiz("user-1", {"feeling": "Fine"})

    def test_task_before_quiz(self, onboarded):
        with pytest.raises(MindsetNotStartedError):
            onboarded.complete_task("user-1")


# ============================================================
# COLLABORATORS
# ============================================================

class TestCollaborators:
    def test_no_image(self):
        assert analyze_daily_photo(FakeInflammationService(), None).status == "No Image"

    def test_no_service(self):
        assert analyze_daily_photo(None, "a.jpg").status == "No Image"

    def test_error_fallback(self):
        result = analyze_daily_photo(FakeInflammationService(fail=True), "a.jpg")
        assert result.status == "Error"
        assert result.inflammation_score == 0

    def test_scan_prefill_merges_present_fields(self, sam_questionnaire):
        merged = apply_scan_prefill(
            sam_questionnaire,
            {"visualAppearance": ["Weeping", "Crusting"], "eczemaLocations": []},
        )
        assert merged.visual_appearance == ["Weeping", "Crusting"]
        assert merged.eczema_locations == ["Arms", "Neck"]
        assert merged.full_name == "Sam Doe"

    def test_empty_prefill_is_noop(self, sam_questionnaire):
        assert apply_scan_prefill(sam_questionnaire, {}) is sam_questionnaire

    def test_analysis_defaults_notes_and_explanation(self):
        result = analyze_daily_photo(None, None)
        assert result.notes == ""
        assert result.explanation == ""


# ============================================================
# COACH ACTIONS
# ============================================================

def _add(name):
    return CoachToolCall(name="add_supplement_to_order", args={"supplement_name": name})


class TestCoachToolCalls:
    def test_reply_accepts_camel_case(self):
        reply = CoachReply.model_validate({
            "text": "Adding Milk Thistle.",
            "toolCalls": [{"name": "add_supplement_to_order", "args": {"supplement_name": "Milk Thistle"}}],
        })
        assert reply.tool_calls[0].args["supplement_name"] == "Milk Thistle"

    def test_new_supplement_added(self, onboarded):
        feedback = onboarded.apply_coach_tool_calls("user-1", [_add("milk thistle")])
        assert feedback == ["Added Milk Thistle to your formula."]
        formula = onboarded.store.get_profile("user-1").current_formula
        assert formula.additives[-1].name == "Milk Thistle"
        assert formula.additives[-1].dose == "Clinical"

    def test_already_in_formula(self, onboarded):
        before = onboarded.store.get_profile("user-1").current_formula
        feedback = onboarded.apply_coach_tool_calls("user-1", [_add("zinc a.a.c.")])
        assert feedback == ["Zinc A.A.C. is already in your formula."]
        assert onboarded.store.get_profile("user-1").current_formula == before

    def test_unknown_supplement_ignored(self, onboarded):
        before = onboarded.store.get_profile("user-1").current_formula
        assert onboarded.apply_coach_tool_calls("user-1", [_add("Turmeric")]) == []
        assert onboarded.store.get_profile("user-1").current_formula == before

    def test_other_tools_skipped(self, onboarded):
        call = CoachToolCall(name="schedule_reminder", args={"time": "21:00"})
        assert onboarded.apply_coach_tool_calls("user-1", [call]) == []

    def test_same_supplement_twice_in_one_reply(self, onboarded):
        feedback = onboarded.apply_coach_tool_calls("user-1", [_add("Milk Thistle"), _add("Milk Thistle")])
        assert feedback == [
            "Added Milk Thistle to your formula.",
            "Milk Thistle is already in your formula.",
        ]

    def test_blend_status_stays_active(self, onboarded):
        onboarded.apply_coach_tool_calls("user-1", [_add("Milk Thistle")])
        assert onboarded.store.get_profile("user-1").blend_status == "Active"

    def test_unknown_user(self, service):
        with pytest.raises(ProfileNotFoundError):
            service.apply_coach_tool_calls("ghost", [_add("Milk Thistle")])
