"""
SkinLogic Mindset Roadmap Selector

Three independent label pickers, each an ordered (predicate, label)
cascade with a default. First match wins.
"""

from typing import Callable, List, Tuple

from skinlogic.shared.text import contains_any, equals_any

from .models import MindsetRoadmap, PsychodermProfile, QuestionnaireData

Cascade = List[Tuple[Callable[[QuestionnaireData, str], bool], str]]

SOS_ITCH_INTERRUPTION = "Cooling Visualization (Itch Interruption)"
SOS_SLEEP_HYPNOSIS = "Deep Sleep Hypnosis"
SOS_DEFAULT = "Progressive Muscle Relaxation"

SLEEP_SUPPORT_DEFAULT = "Deep Delta Wave Hypnosis"

CBT_MIRROR_WORK = "Mirror Work & Self-Compassion"
CBT_BEHAVIORAL_ACTIVATION = "Behavioral Activation"
CBT_DEFAULT = "Stress Reframing"


SOS_CASCADE: Cascade = [
    (
        lambda q, p: (
            q.itch_score > 6
            or "Stop Itch" in q.primary_goal
            or contains_any(q.scratch_timing, "Constant")
        ),
        SOS_ITCH_INTERRUPTION,
    ),
    (
        lambda q, p: (
            equals_any(q.sleep_impact, "Severe")
            or "Sleep Better" in q.primary_goal
            or contains_any(q.scratch_timing, "Night")
        ),
        SOS_SLEEP_HYPNOSIS,
    ),
]

# Single track for now; kept as a cascade so new tracks slot in by priority.
SLEEP_SUPPORT_CASCADE: Cascade = []

CBT_CASCADE: Cascade = [
    (
        lambda q, p: p == PsychodermProfile.SHAME_PRONE or "Confidence" in q.primary_goal,
        CBT_MIRROR_WORK,
    ),
    (lambda q, p: p == PsychodermProfile.AVOIDANT, CBT_BEHAVIORAL_ACTIVATION),
]


def _pick(cascade: Cascade, data: QuestionnaireData, profile: str, default: str) -> str:
    for predicate, label in cascade:
        if predicate(data, profile):
            return label
    return default


def select_mindset_roadmap(data: QuestionnaireData, psychoderm_profile: str) -> MindsetRoadmap:
    return MindsetRoadmap(
        sos=_pick(SOS_CASCADE, data, psychoderm_profile, SOS_DEFAULT),
        sleep_support=_pick(SLEEP_SUPPORT_CASCADE, data, psychoderm_profile, SLEEP_SUPPORT_DEFAULT),
        cbt_pathway=_pick(CBT_CASCADE, data, psychoderm_profile, CBT_DEFAULT),
    )
