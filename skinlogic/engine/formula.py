"""Blend formula: the starter blend and coach-driven additions."""

from typing import Optional, Tuple

from .ingredients import INGREDIENT_CATALOG
from .models import BlendFormula, ComputedProfile, SupplementAdditive

STARTER_BASE = "Vegan Rice Protein"
STARTER_FLAVOR = "Baobab Vanilla"
STARTER_DOSE = "Clinical"


def build_starter_formula(computed: ComputedProfile, name: Optional[str] = None) -> BlendFormula:
    """Phase-1 ingredients become the additives of the first blend."""
    return BlendFormula(
        base=STARTER_BASE,
        additives=[
            SupplementAdditive(name=ingredient, dose=STARTER_DOSE)
            for ingredient in computed.supplement_protocol.phase1
        ],
        flavor=STARTER_FLAVOR,
        name=name,
    )


def default_blend_name(full_name: str) -> str:
    first = full_name.split(" ")[0] if full_name.strip() else ""
    return f"{first}'s Formula" if first else "My Formula"


def find_catalog_ingredient(name: str) -> Optional[str]:
    """Catalog spelling of `name`, matched ignoring case."""
    key = name.strip().lower()
    for catalog_name in INGREDIENT_CATALOG:
        if catalog_name.lower() == key:
            return catalog_name
    return None


def add_supplement_to_formula(
    formula: BlendFormula,
    supplement_name: str,
) -> Tuple[BlendFormula, Optional[str]]:
    """
    Append a catalog ingredient at the clinical dose.

    Returns the (possibly unchanged) formula and a feedback message.
    Names missing from the catalog are ignored with no message.
    """
    name = find_catalog_ingredient(supplement_name)
    if name is None:
        return formula, None
    if any(additive.name == name for additive in formula.additives):
        return formula, f"{name} is already in your formula."

    updated = formula.model_copy(
        update={"additives": [*formula.additives, SupplementAdditive(name=name, dose=STARTER_DOSE)]}
    )
    return updated, f"Added {name} to your formula."
