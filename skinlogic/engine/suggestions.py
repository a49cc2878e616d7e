"""Nutrition suggestions and lifestyle tips attached to a ComputedProfile."""

from typing import Callable, List, Tuple

from skinlogic.shared.text import (
    contains_any,
    differs_from,
    equals_any,
    has_substring,
)

from .models import QuestionnaireData

Suggestion = Tuple[Callable[[QuestionnaireData], bool], str]

NUTRITION_RULES: List[Suggestion] = [
    (lambda q: differs_from(q.gut_health, "Good"),
     "Strict 4-week elimination of gluten & dairy."),
    (lambda q: "Dry" in q.visual_appearance,
     "Add 2 tbsp of flaxseed or chia to breakfast."),
    (lambda q: has_substring(q.medication_usage, "steroid"),
     "Increase Vitamin C rich foods to support skin thickness."),
    (lambda q: differs_from(q.smoking, "Never"),
     "Double your Vitamin C intake to counter smoke-induced oxidation."),
]

LIFESTYLE_RULES: List[Suggestion] = [
    (lambda q: equals_any(q.perceived_stress, "High"),
     "Mandatory 10min vagus nerve stimulation (humming/cold water)."),
    (lambda q: equals_any(q.exercise_level, "Active"),
     "Rinse sweat immediately with cool water to prevent alkalization."),
    (lambda q: "Sleep Better" in q.primary_goal,
     "Keep room temperature below 19°C (66°F) to reduce itch."),
    (lambda q: has_substring(q.shower_temp, "hot"),
     "Switch to lukewarm showers immediately. Hot water strips lipids."),
    (lambda q: contains_any(q.clothing_fabrics, "Wool", "Synthetic"),
     "Switch to 100% cotton or bamboo layers to reduce micro-friction."),
    (lambda q: has_substring(q.laundry_detergent, "scented"),
     "Switch to 'Free & Clear' detergent. Fragrance is a top contact allergen."),
    (lambda q: len(q.pets) > 0,
     "Keep pets out of the bedroom to create a dander-free sleep sanctuary."),
    (lambda q: has_substring(q.sweat_trigger, "yes"),
     "Carry a thermal water spray to neutralize sweat pH instantly."),
]


def nutrition_suggestions(data: QuestionnaireData) -> List[str]:
    return [text for predicate, text in NUTRITION_RULES if predicate(data)]


def lifestyle_tips(data: QuestionnaireData) -> List[str]:
    return [text for predicate, text in LIFESTYLE_RULES if predicate(data)]
