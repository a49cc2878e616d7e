"""
SkinLogic Root-Cause Summarizer

Composes the root-cause sentence from matched trigger predicates.
Phrase order follows TRIGGER_RULES exactly so the text is reproducible.
"""

from typing import Callable, List, Tuple

from skinlogic.shared.text import (
    differs_from,
    equals_any,
    has_any,
    has_substring,
)

from .classifier import is_high_stress
from .models import QuestionnaireData


def _withdrawal(q: QuestionnaireData) -> bool:
    return has_substring(q.medication_usage, "withdrawal") or has_substring(q.medication_usage, "tsw")


def _gut_dysbiosis(q: QuestionnaireData) -> bool:
    return differs_from(q.gut_health, "Good")


def _dietary(q: QuestionnaireData) -> bool:
    return equals_any(q.diet_style, "Standard") and len(q.suspected_triggers) > 0


def _smoker(q: QuestionnaireData) -> bool:
    return differs_from(q.smoking, "Never")


def _sweat_alkalization(q: QuestionnaireData) -> bool:
    active = equals_any(q.exercise_level, "Active", "Athlete")
    return active and has_any(q.eczema_locations, "Arms", "Legs")


TRIGGER_RULES: List[Tuple[Callable[[QuestionnaireData], bool], str]] = [
    (lambda q: equals_any(q.eczema_onset, "Childhood"), "genetic filaggrin deficiency"),
    (_withdrawal, "vascular dilation (TSW)"),
    (is_high_stress, "chronic cortisol spikes"),
    (_gut_dysbiosis, "gut microbiome dysbiosis"),
    (_dietary, "dietary inflammation"),
    (lambda q: equals_any(q.hydration, "<1L"), "cellular dehydration"),
    (_smoker, "oxidative stress from smoking"),
    (lambda q: len(q.pets) > 0, "household protein allergens"),
    (lambda q: has_substring(q.shower_temp, "hot"), "thermal barrier stripping"),
    (_sweat_alkalization, "sweat-induced alkalization"),
]

SUMMARY_TEMPLATE = (
    "Your profile suggests a complex flare loop driven by {triggers}. "
    "Addressing these internal triggers is your priority."
)

BARRIER_DEFECTIVE_SUMMARY = (
    'Your eczema appears primarily "Barrier-Defective," meaning your skin '
    "struggles to retain lipids and water, making it hyper-reactive to "
    "environmental triggers."
)


def matched_triggers(data: QuestionnaireData) -> List[str]:
    return [phrase for predicate, phrase in TRIGGER_RULES if predicate(data)]


def summarize_root_cause(data: QuestionnaireData) -> str:
    triggers = matched_triggers(data)
    if triggers:
        return SUMMARY_TEMPLATE.format(triggers=", ".join(triggers))
    return BARRIER_DEFECTIVE_SUMMARY
