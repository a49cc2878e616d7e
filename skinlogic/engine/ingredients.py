"""
SkinLogic Ingredient Catalog & Explainability

Static ingredient metadata plus "why is this in my protocol" copy.
Explains decisions already made by the protocol builder; never changes
them.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel

from skinlogic.shared.text import differs_from, equals_any, has_substring

from .classifier import is_high_stress
from .models import ComputedProfile, QuestionnaireData, SkinType


class Ingredient(BaseModel):
    name: str
    category: str

    class Config:
        frozen = True


class IngredientExplanation(BaseModel):
    name: str
    phase: int
    category: Optional[str] = None
    benefit_header: Optional[str] = None
    reason: str


INGREDIENT_CATALOG: Dict[str, Ingredient] = {
    i.name: i
    for i in [
        Ingredient(name="Collagen Peptides", category="Proteins"),
        Ingredient(name="MCT Powder", category="Fats"),
        Ingredient(name="Vitamin C", category="Vitamins"),
        Ingredient(name="Vitamin D3", category="Vitamins"),
        Ingredient(name="Vitamin K2", category="Vitamins"),
        Ingredient(name="Vitamin B12 (Methylcobalamin)", category="Vitamins"),
        Ingredient(name="Zinc A.A.C.", category="Minerals"),
        Ingredient(name="Magnesium Glycinate", category="Minerals"),
        Ingredient(name="Iron A.A.C.", category="Minerals"),
        Ingredient(name="Calcium Lactate", category="Minerals"),
        Ingredient(name="Electrolyte Blend", category="Minerals"),
        Ingredient(name="L-Glutamine", category="Amino Acids"),
        Ingredient(name="N-Acetyl-L-Cysteine", category="Amino Acids"),
        Ingredient(name="Quercetin", category="Other"),
        Ingredient(name="Probiotic", category="Other"),
        Ingredient(name="DigeZyme®", category="Other"),
        Ingredient(name="Ashwagandha", category="Other"),
        Ingredient(name="Milk Thistle", category="Other"),
    ]
}

BENEFIT_HEADERS = {
    "Proteins": "Barrier Builders",
    "Fats": "Moisture Locks",
    "Vitamins": "Cellular Repair",
    "Minerals": "Reaction Calmness",
    "Amino Acids": "Growth Factors",
    "Other": "Specialized Actives",
}

DEFAULT_REASON = "Selected to optimize your specific skin recovery profile."
MISSING_PROFILE_REASON = "Standard protocol for barrier repair."


def benefit_header(category: Optional[str]) -> Optional[str]:
    if category is None:
        return None
    return BENEFIT_HEADERS.get(category, category)


def explain_ingredient(
    name: str,
    data: Optional[QuestionnaireData],
    computed: Optional[ComputedProfile],
) -> str:
    """
    Personalized reason for one ingredient.

    Keyword cascade on the lower-cased name; first matching branch wins.
    """
    if data is None or computed is None:
        return MISSING_PROFILE_REASON

    n = name.lower()

    if "zinc" in n:
        if computed.inflammation_level == "High":
            return "Your redness score indicated high inflammation. Zinc is critical for calming the cytokine storm."
        return "The 'Master Mineral' for skin. Essential for DNA synthesis and wound healing."
    if "collagen" in n:
        if has_substring(data.medication_usage, "steroid"):
            return "Steroids can thin the skin over time. Collagen peptides are added to help maintain dermal thickness and resilience."
        if data.skin_type in (SkinType.DRY, SkinType.COMBINATION):
            return "Your dry skin type lacks structural integrity. Collagen peptides provide the scaffold to hold moisture."
        return "Provides high levels of Glycine and Proline, the specific amino acids needed to repair damaged skin tissue."
    if "mct" in n:
        if "Dry" in data.visual_appearance:
            return "Your skin is signaling lipid depletion. MCT provides clean fatty acids to rebuild your oil barrier from within."
        return "Provides rapid energy for cellular regeneration without triggering insulin spikes."

    if "quercetin" in n:
        if data.itch_score > 4:
            return f"You reported an Itch Score of {data.itch_score}/10. Quercetin acts to stop the itch signal at the source."
        return "Potent antioxidant to reduce oxidative stress on your skin barrier."
    if "vitamin c" in n:
        if "Weeping" in data.visual_appearance or "Slow Healing" in data.deficiency_symptoms:
            return "Critical for collagen cross-linking to close open wounds and speed up healing."
        return "Works synergistically with Quercetin to stabilize mast cells."

    if "electrolyte" in n:
        if equals_any(data.exercise_level, "Active", "Athlete"):
            return "Heavy sweating depletes minerals and can alkalize skin pH. Electrolytes help maintain balance during your workouts."
        return "Maintains cellular hydration."

    if "glutamine" in n:
        if differs_from(data.gut_health, "Good"):
            return (
                f"You noted '{data.gut_health}' gut issues. Glutamine fuels enterocytes to seal the gut lining, "
                "stopping triggers from entering your bloodstream."
            )
        if equals_any(data.diet_style, "Standard"):
            return "Added to repair gut mucosal integrity compromised by dietary gaps."
        return "Supports the Gut-Skin Axis by ensuring your intestinal barrier is strong."
    if "probiotic" in n:
        return "Restores microbiome diversity to reduce systemic inflammation stemming from the gut."
    if "digezyme" in n:
        return "Ensures you actually absorb these nutrients despite reported gut sensitivity."

    if "magnesium" in n:
        if "Sleep Better" in data.primary_goal:
            return "Since Sleep is your #1 goal, Magnesium is critical here to activate GABA receptors for deep, restorative rest."
        if differs_from(data.perceived_stress, "Low"):
            return "High stress depletes Magnesium rapidly. Replenishing this lowers cortisol to break the stress-itch cycle."
        return "Relaxation mineral to support nervous system health."
    if "ashwagandha" in n or "rhodiola" in n:
        if is_high_stress(data):
            return "A potent adaptogen added to help your body physically handle the high stress load you reported."
        return "Modulates cortisol levels to prevent stress-induced flare ups."

    if "vitamin d" in n:
        return "Regulates the immune system's response to triggers."
    if "vitamin k2" in n:
        return "Works with Vitamin D to ensure calcium is deposited in bones, not soft tissue."
    if "iron" in n:
        if "Fatigue" in data.deficiency_symptoms:
            return "Added to address the fatigue you reported, supporting oxygen transport to skin cells."
        return "Essential for blood health and energy."

    item = INGREDIENT_CATALOG.get(name)
    if item and item.category == "Amino Acids":
        return "Building blocks for repairing damaged skin tissue."
    if item and item.category == "Vitamins":
        return "Micronutrient support for cellular health."

    return DEFAULT_REASON


def explain_protocol(data: QuestionnaireData, computed: ComputedProfile) -> List[IngredientExplanation]:
    """One explanation per protocol ingredient, in phase then insertion order."""
    protocol = computed.supplement_protocol
    explanations: List[IngredientExplanation] = []

    for phase, names in ((1, protocol.phase1), (2, protocol.phase2), (3, protocol.phase3)):
        for name in names:
            item = INGREDIENT_CATALOG.get(name)
            category = item.category if item else None
            explanations.append(IngredientExplanation(
                name=name,
                phase=phase,
                category=category,
                benefit_header=benefit_header(category),
                reason=explain_ingredient(name, data, computed),
            ))

    return explanations
