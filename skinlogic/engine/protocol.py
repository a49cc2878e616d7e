"""
SkinLogic Protocol Builder
==========================
Assigns supplement ingredients to three ordered phases.

- Phase 1: immediate
- Phase 2: secondary
- Phase 3: maintenance / optional

Every rule is evaluated for every questionnaire (no early exit). A rule
adds its ingredients when its predicate holds, or its `otherwise`
ingredients when it does not. Phases are insertion-ordered sets, so final
membership does not depend on rule order while display order does.
The only mutually exclusive pair is the adaptogen split between phase 1
(high stress) and phase 3 (moderate stress).
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from skinlogic.shared.ordered_set import OrderedSet
from skinlogic.shared.text import (
    differs_from,
    equals_any,
    has_any,
    has_substring,
)

from .classifier import inflammation_level, is_high_stress, psychoderm_profile
from .models import (
    InflammationLevel,
    PsychodermProfile,
    QuestionnaireData,
    SkinType,
    SupplementProtocol,
)
from .scoring import score_clinical

logger = logging.getLogger(__name__)

PHASES = (1, 2, 3)
BASELINE_INGREDIENT = "Zinc A.A.C."
ADAPTOGEN = "Ashwagandha"

Placement = Tuple[int, str]


# =============================================================================
# MODELS
# =============================================================================

@dataclass(frozen=True)
class RuleContext:
    """Questionnaire plus the classifier labels some rules depend on."""
    data: QuestionnaireData
    inflammation_level: str
    psychoderm_profile: str


@dataclass(frozen=True)
class ProtocolRule:
    rule_id: str
    when: Callable[[RuleContext], bool]
    adds: Tuple[Placement, ...]
    otherwise: Tuple[Placement, ...] = ()


@dataclass
class ProtocolBuildResult:
    protocol: SupplementProtocol
    applied_rules: List[str] = field(default_factory=list)


# =============================================================================
# PREDICATES
# =============================================================================

def _uses_steroids(q: QuestionnaireData) -> bool:
    return has_substring(q.medication_usage, "steroid")


def _sweat_stings(q: QuestionnaireData) -> bool:
    return has_substring(q.sweat_trigger, "yes")


def _active(q: QuestionnaireData) -> bool:
    return equals_any(q.exercise_level, "Active", "Athlete")


def _needs_structural_support(ctx: RuleContext) -> bool:
    q = ctx.data
    return (
        q.skin_type in (SkinType.DRY, SkinType.COMBINATION, SkinType.WEEPING)
        or _uses_steroids(q)
        or has_substring(q.medication_usage, "tsw")
        or equals_any(q.steroid_usage_history, ">5 years")
        or equals_any(q.smoking, "Regular")
    )


def _needs_antihistamine(ctx: RuleContext) -> bool:
    q = ctx.data
    visible = has_any(q.visual_appearance, "Red", "Weeping", "Crusting", "Swelling")
    return (
        q.itch_score > 4
        or visible
        or ctx.inflammation_level != InflammationLevel.LOW
        or "Stop Itch" in q.primary_goal
        or _sweat_stings(q)
    )


def _needs_vitamin_c(ctx: RuleContext) -> bool:
    q = ctx.data
    return q.itch_score > 6 or "Weeping" in q.visual_appearance or differs_from(q.smoking, "Never")


def _needs_electrolytes(ctx: RuleContext) -> bool:
    return _active(ctx.data) or _sweat_stings(ctx.data)


def _drinks_regularly(ctx: RuleContext) -> bool:
    alcohol = ctx.data.alcohol
    return has_substring(alcohol, "moderate") or has_substring(alcohol, "high")


def _plant_based(ctx: RuleContext) -> bool:
    return equals_any(ctx.data.diet_style, "Vegan", "Vegetarian")


def _gut_involved(ctx: RuleContext) -> bool:
    q = ctx.data
    return differs_from(q.gut_health, "Good") or len(q.suspected_triggers) > 0


def _needs_magnesium(ctx: RuleContext) -> bool:
    q = ctx.data
    return (
        differs_from(q.perceived_stress, "Low")
        or differs_from(q.sleep_impact, "None")
        or ctx.psychoderm_profile == PsychodermProfile.STRESS_REACTIVE
        or "Sleep Better" in q.primary_goal
    )


def _not_pregnant(q: QuestionnaireData) -> bool:
    return equals_any(q.pregnancy_status, "None")


def _acute_adaptogen(ctx: RuleContext) -> bool:
    return is_high_stress(ctx.data) and _not_pregnant(ctx.data)


def _maintenance_adaptogen(ctx: RuleContext) -> bool:
    return equals_any(ctx.data.perceived_stress, "Moderate") and _not_pregnant(ctx.data)


def _lipid_depleted(ctx: RuleContext) -> bool:
    q = ctx.data
    return (
        "Dry" in q.visual_appearance
        or "Lichenified" in q.visual_appearance
        or q.skin_type == SkinType.DRY
        or equals_any(q.climate, "Dry/Cold", "Dry")
    )


def _bone_risk(ctx: RuleContext) -> bool:
    return "Osteoporosis" in ctx.data.bone_joint_health or _uses_steroids(ctx.data)


def _photosensitive(ctx: RuleContext) -> bool:
    return equals_any(ctx.data.sun_effect, "Worsens")


# =============================================================================
# RULE TABLE
# =============================================================================

PROTOCOL_RULES: List[ProtocolRule] = [
    ProtocolRule("foundation", lambda ctx: True, ((1, BASELINE_INGREDIENT),)),
    ProtocolRule(
        "structural_support", _needs_structural_support,
        adds=((1, "Collagen Peptides"),),
        otherwise=((2, "Collagen Peptides"),),
    ),
    ProtocolRule("itch_antihistamine", _needs_antihistamine, ((1, "Quercetin"),)),
    ProtocolRule("wound_healing", _needs_vitamin_c, ((1, "Vitamin C"),)),
    ProtocolRule("sweat_management", _needs_electrolytes, ((1, "Electrolyte Blend"),)),
    ProtocolRule("liver_support", _drinks_regularly, ((2, "Milk Thistle"),)),
    ProtocolRule(
        "plant_based_gaps", _plant_based,
        ((1, "Vitamin B12 (Methylcobalamin)"), (2, "Iron A.A.C.")),
    ),
    ProtocolRule(
        "gut_skin_axis", _gut_involved,
        adds=((1, "L-Glutamine"), (2, "DigeZyme®"), (2, "Probiotic")),
        otherwise=((2, "Probiotic"),),
    ),
    ProtocolRule("nervous_system", _needs_magnesium, ((1, "Magnesium Glycinate"),)),
    ProtocolRule("adaptogen_acute", _acute_adaptogen, ((1, ADAPTOGEN),)),
    ProtocolRule("adaptogen_maintenance", _maintenance_adaptogen, ((3, ADAPTOGEN),)),
    ProtocolRule(
        "lipid_barrier", _lipid_depleted,
        adds=((1, "MCT Powder"),),
        otherwise=((3, "MCT Powder"),),
    ),
    ProtocolRule(
        "bone_support", _bone_risk,
        adds=((1, "Vitamin D3"), (1, "Vitamin K2"), (1, "Calcium Lactate")),
        otherwise=((1, "Vitamin D3"), (1, "Vitamin K2")),
    ),
    ProtocolRule("photosensitivity", _photosensitive, ((1, "N-Acetyl-L-Cysteine"),)),
]


# =============================================================================
# PROTOCOL BUILDER
# =============================================================================

class ProtocolBuilder:
    """Applies every rule in order and collects de-duplicated phases."""

    def __init__(self, rules: Optional[List[ProtocolRule]] = None):
        self.rules = rules if rules is not None else PROTOCOL_RULES

    def build(self, ctx: RuleContext) -> ProtocolBuildResult:
        phases: Dict[int, OrderedSet[str]] = {phase: OrderedSet() for phase in PHASES}
        applied: List[str] = []

        for rule in self.rules:
            if rule.when(ctx):
                placements = rule.adds
                applied.append(rule.rule_id)
            else:
                placements = rule.otherwise

            for phase, ingredient in placements:
                phases[phase].add(ingredient)

        protocol = SupplementProtocol(
            phase1=phases[1].to_list(),
            phase2=phases[2].to_list(),
            phase3=phases[3].to_list(),
        )
        logger.debug(f"Protocol rules applied: {applied}")
        return ProtocolBuildResult(protocol=protocol, applied_rules=applied)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def build_rule_context(
    data: QuestionnaireData,
    inflammation: Optional[str] = None,
    psychoderm: Optional[str] = None,
) -> RuleContext:
    """Fill in classifier labels that were not supplied by the caller."""
    if inflammation is None:
        inflammation = inflammation_level(score_clinical(data).po_scorad, data)
    if psychoderm is None:
        psychoderm = psychoderm_profile(data)
    return RuleContext(
        data=data,
        inflammation_level=InflammationLevel(inflammation).value,
        psychoderm_profile=PsychodermProfile(psychoderm).value,
    )


def build_protocol(
    data: QuestionnaireData,
    inflammation: Optional[str] = None,
    psychoderm: Optional[str] = None,
) -> SupplementProtocol:
    """
    Convenience function for protocol building.

    Args:
        data: Questionnaire snapshot
        inflammation: Precomputed inflammation level (computed if omitted)
        psychoderm: Precomputed psychoderm profile (computed if omitted)

    Returns:
        SupplementProtocol with phase1/phase2/phase3
    """
    ctx = build_rule_context(data, inflammation, psychoderm)
    return ProtocolBuilder().build(ctx).protocol
