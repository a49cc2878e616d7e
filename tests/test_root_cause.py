"""
Root-Cause Summarizer Tests
"""

from skinlogic.engine.models import QuestionnaireData
from skinlogic.engine.root_cause import (
    BARRIER_DEFECTIVE_SUMMARY,
    matched_triggers,
    summarize_root_cause,
)


class TestMatchedTriggers:
    def test_phrase_order_is_fixed(self, sam_questionnaire):
        assert matched_triggers(sam_questionnaire) == [
            "genetic filaggrin deficiency",
            "chronic cortisol spikes",
            "gut microbiome dysbiosis",
            "dietary inflammation",
            "household protein allergens",
            "thermal barrier stripping",
        ]

    def test_withdrawal_detected_by_tsw(self):
        q = QuestionnaireData(medication_usage="TSW (Withdrawal)")
        assert matched_triggers(q) == ["vascular dilation (TSW)"]

    def test_good_gut_is_not_dysbiosis(self):
        q = QuestionnaireData(gut_health="good")
        assert matched_triggers(q) == []

    def test_missing_buckets_match_nothing(self, empty_questionnaire):
        """Blank gut health or smoking answers are not negative findings"""
        assert matched_triggers(empty_questionnaire) == []

    def test_smoking_case_insensitive(self):
        assert matched_triggers(QuestionnaireData(smoking="never")) == []
        assert matched_triggers(QuestionnaireData(smoking="Regular")) == [
            "oxidative stress from smoking",
        ]

    def test_sweat_needs_active_and_limbs(self):
        q = QuestionnaireData(exercise_level="Athlete", eczema_locations=["Legs"])
        assert matched_triggers(q) == ["sweat-induced alkalization"]
        q = QuestionnaireData(exercise_level="Athlete", eczema_locations=["Face"])
        assert matched_triggers(q) == []

    def test_dehydration(self):
        assert matched_triggers(QuestionnaireData(hydration="<1L")) == ["cellular dehydration"]


class TestSummarizeRootCause:
    def test_joins_triggers_into_template(self):
        q = QuestionnaireData(eczema_onset="Childhood", perceived_stress="High")
        assert summarize_root_cause(q) == (
            "Your profile suggests a complex flare loop driven by genetic filaggrin "
            "deficiency, chronic cortisol spikes. Addressing these internal triggers "
            "is your priority."
        )

    def test_fallback_summary(self, empty_questionnaire):
        assert summarize_root_cause(empty_questionnaire) == BARRIER_DEFECTIVE_SUMMARY
