"""
Persona Classifier
==================
Maps mindset quiz answers to one of five personas and its content module.

Rules are evaluated in order and the first match wins. Substring tests are
case-sensitive against the literal option vocabulary in content.py.
"""

import logging
from typing import Callable, Dict, List, Mapping, Tuple

from skinlogic.shared.errors import QuizValidationError

from .content import QUIZ_OPTIONS
from .models import MindsetPersona, QuizResult

logger = logging.getLogger(__name__)

Answers = Mapping[str, str]


def _contains(answers: Answers, question_id: str, *needles: str) -> bool:
    answer = answers.get(question_id) or ""
    return any(needle in answer for needle in needles)


def _is(answers: Answers, question_id: str, option: str) -> bool:
    return answers.get(question_id) == option


PERSONA_RULES: List[Tuple[Callable[[Answers], bool], MindsetPersona, str]] = [
    (
        lambda a: (
            _is(a, "feeling", "Angry")
            or _contains(a, "thought", "control")
            or _contains(a, "soothing", "Scratching", "Hot water")
            or _contains(a, "control", "fighting")
        ),
        MindsetPersona.FIGHTER,
        "rewire-itch",
    ),
    (
        lambda a: (
            _is(a, "feeling", "Ashamed")
            or _contains(a, "thought", "Hate")
            or _contains(a, "mirror", "avoid")
            or _contains(a, "social", "hide")
        ),
        MindsetPersona.HIDER,
        "rebuild-identity",
    ),
    (
        lambda a: (
            _contains(a, "thought", "Never")
            or _is(a, "belief", "No")
            or _contains(a, "control", "controls me")
        ),
        MindsetPersona.HOPELESS_HEALER,
        "attract-healed",
    ),
    (
        lambda a: (
            _is(a, "feeling", "Disconnected")
            or _is(a, "inner_voice", "Lost")
            or _contains(a, "intimacy", "pull away")
        ),
        MindsetPersona.WOUNDED_INNER_CHILD,
        "release-battle",
    ),
]

DEFAULT_PERSONA = (MindsetPersona.BURNT_OUT_OVERTHINKER, "stress-safety")


def analyze_mindset_quiz(answers: Answers) -> QuizResult:
    """Resolve persona and module id. Unmatched answers fall to the default."""
    for predicate, persona, module_id in PERSONA_RULES:
        if predicate(answers):
            return QuizResult(persona=persona, module_id=module_id)
    persona, module_id = DEFAULT_PERSONA
    return QuizResult(persona=persona, module_id=module_id)


def validate_quiz_answers(answers: Answers) -> Dict[str, str]:
    """
    Check answers against the quiz vocabulary.

    Unknown question ids are ignored. Raises QuizValidationError mapping
    each offending question id to the rejected value.
    """
    errors = {
        qid: value
        for qid, value in answers.items()
        if qid in QUIZ_OPTIONS and value not in QUIZ_OPTIONS[qid]
    }
    if errors:
        logger.warning(f"Rejected quiz answers for {sorted(errors)}")
        raise QuizValidationError(errors)
    return dict(answers)
