"""
Persona Classifier Tests

Rule priority is a contract: the first matching persona wins even when
later rules also match.
"""

import pytest

from skinlogic.mindset.content import MINDSET_MODULES, QUIZ_QUESTIONS
from skinlogic.mindset.persona import analyze_mindset_quiz, validate_quiz_answers
from skinlogic.shared.errors import QuizValidationError


class TestPriority:
    def test_fighter_beats_hopeless(self):
        """Both rule 1 (Angry) and rule 3 (Never) match"""
        result = analyze_mindset_quiz({"feeling": "Angry", "thought": "Never fix"})
        assert result.persona == "The Fighter"
        assert result.module_id == "rewire-itch"

    def test_hider_beats_inner_child(self):
        result = analyze_mindset_quiz({"mirror": "I avoid mirrors entirely", "inner_voice": "Lost"})
        assert result.persona == "The Hider"


class TestPersonas:
    @pytest.mark.parametrize("answers", [
        {"feeling": "Angry"},
        {"thought": "I can't control this"},
        {"soothing": "Scratching until it hurts"},
        {"control": "I am fighting it"},
    ])
    def test_fighter(self, answers):
        assert analyze_mindset_quiz(answers).module_id == "rewire-itch"

    @pytest.mark.parametrize("answers", [
        {"feeling": "Ashamed"},
        {"mirror": "I avoid mirrors entirely"},
        {"social": "I go but I hide"},
    ])
    def test_hider(self, answers):
        result = analyze_mindset_quiz(answers)
        assert result.persona == "The Hider"
        assert result.module_id == "rebuild-identity"

    @pytest.mark.parametrize("answers", [
        {"belief": "No"},
        {"control": "My skin controls me"},
    ])
    def test_hopeless_healer(self, answers):
        result = analyze_mindset_quiz(answers)
        assert result.persona == "The Hopeless Healer"
        assert result.module_id == "attract-healed"

    @pytest.mark.parametrize("answers", [
        {"feeling": "Disconnected"},
        {"inner_voice": "Lost"},
        {"intimacy": "I pull away / Avoid touch"},
    ])
    def test_wounded_inner_child(self, answers):
        result = analyze_mindset_quiz(answers)
        assert result.persona == "The Wounded Inner Child"
        assert result.module_id == "release-battle"

    @pytest.mark.parametrize("answers", [
        {},
        {"feeling": "Anxious", "belief": "Maybe"},
    ])
    def test_default_overthinker(self, answers):
        result = analyze_mindset_quiz(answers)
        assert result.persona == "The Burnt-Out Overthinker"
        assert result.module_id == "stress-safety"

    def test_matching_is_case_sensitive(self):
        """'Scalding hot water' does not contain 'Hot water'"""
        result = analyze_mindset_quiz({"soothing": "Scalding hot water"})
        assert result.persona == "The Burnt-Out Overthinker"


class TestValidateQuizAnswers:
    def test_valid_answers_pass(self):
        answers = {"feeling": "Angry", "belief": "I hope so"}
        assert validate_quiz_answers(answers) == answers

    def test_unknown_option_rejected(self):
        with pytest.raises(QuizValidationError) as exc:
            validate_quiz_answers({"feeling": "Happy", "belief": "No"})
        assert exc.value.errors == {"feeling": "Happy"}

    def test_unknown_question_ignored(self):
        assert validate_quiz_answers({"favorite_color": "Blue"}) == {"favorite_color": "Blue"}


class TestQuizContent:
    def test_fifteen_unique_questions(self):
        ids = [q.id for q in QUIZ_QUESTIONS]
        assert len(ids) == 15
        assert len(set(ids)) == 15

    def test_four_options_each(self):
        assert all(len(q.options) == 4 for q in QUIZ_QUESTIONS)

    def test_every_persona_module_exists(self):
        for answers in ({"feeling": "Angry"}, {"feeling": "Ashamed"}, {"belief": "No"},
                        {"feeling": "Disconnected"}, {}):
            assert analyze_mindset_quiz(answers).module_id in MINDSET_MODULES
