"""
SkinLogic Classifier

Maps PO-SCORAD and questionnaire answers to three independent labels.
Each label is an ordered rule table evaluated first-match-wins; the
order of the tables is part of the contract.
"""

from typing import Callable, List, Tuple

from skinlogic.shared.text import equals_any

from .models import (
    Classification,
    InflammationLevel,
    PsychodermProfile,
    QuestionnaireData,
    SeverityClass,
)

# Exclusive lower bounds, highest first
SEVERITY_THRESHOLDS: List[Tuple[float, SeverityClass]] = [
    (50, SeverityClass.HIGH_RISK),
    (28, SeverityClass.SEVERE),
    (15, SeverityClass.MODERATE),
]

ACTIVE_SIGNS = ("Red", "Weeping", "Crusting", "Swelling")


def severity_class(po_scorad: float) -> SeverityClass:
    for threshold, label in SEVERITY_THRESHOLDS:
        if po_scorad > threshold:
            return label
    return SeverityClass.MILD


def is_high_stress(data: QuestionnaireData) -> bool:
    return equals_any(data.perceived_stress, "High", "Overwhelmed")


PSYCHODERM_RULES: List[Tuple[Callable[[QuestionnaireData], bool], PsychodermProfile]] = [
    (lambda q: "Shame" in q.mental_impact, PsychodermProfile.SHAME_PRONE),
    (lambda q: "Social Anxiety" in q.mental_impact, PsychodermProfile.AVOIDANT),
    (is_high_stress, PsychodermProfile.STRESS_REACTIVE),
]


def psychoderm_profile(data: QuestionnaireData) -> PsychodermProfile:
    for predicate, label in PSYCHODERM_RULES:
        if predicate(data):
            return label
    return PsychodermProfile.RESILIENT


def active_sign_count(data: QuestionnaireData) -> int:
    return sum(1 for sign in ACTIVE_SIGNS if sign in data.visual_appearance)


def inflammation_level(po_scorad: float, data: QuestionnaireData) -> InflammationLevel:
    signs = active_sign_count(data)

    rules = [
        (signs >= 2 or data.itch_score > 6 or po_scorad > 40, InflammationLevel.HIGH),
        (signs == 1 or data.itch_score > 4 or "Dry" in data.visual_appearance,
         InflammationLevel.MODERATE),
    ]
    for matched, label in rules:
        if matched:
            return label
    return InflammationLevel.LOW


def classify(po_scorad: float, data: QuestionnaireData) -> Classification:
    """Severity class, psychoderm profile and inflammation level."""
    return Classification(
        severity_class=severity_class(po_scorad),
        psychoderm_profile=psychoderm_profile(data),
        inflammation_level=inflammation_level(po_scorad, data),
    )
