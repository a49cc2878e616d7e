"""
SkinLogic Clinical Scorer
PO-SCORAD approximation and EASI mapping from questionnaire answers.

    A = sum(body-area weights), clamped to [0, 100]
    B = sum(visual-sign weights), clamped to <= 18
    C = itch (1-10) + sleep sub-score
    PO-SCORAD = A/5 + 7*B/2 + C
    EASI      = PO-SCORAD / 2.5

Rounding to one decimal happens only on the final values.
"""

from typing import Dict, Iterable, Mapping, Optional

from skinlogic.shared.text import norm

from .models import ClinicalScores, QuestionnaireData


# Approximate rule of nines per selectable location
AREA_WEIGHTS: Dict[str, float] = {
    "Face": 4.5,
    "Neck": 1,
    "Hands": 2.5,
    "Arms": 9,
    "Torso": 18,
    "Legs": 18,
}

# Oozing (Weeping) weighs more than the other signs
INTENSITY_WEIGHTS: Dict[str, float] = {
    "Dry": 2,
    "Red": 2,
    "Weeping": 3,
    "Crusting": 2,
    "Swelling": 2,
    "Lichenified": 2,
}

SLEEP_WEIGHTS: Dict[str, float] = {
    "none": 0,
    "mild": 2,
    "moderate": 5,
    "severe": 8,
}

AREA_MAX = 100
INTENSITY_MAX = 18
EASI_RATIO = 2.5


def area_score(
    locations: Iterable[str],
    weights: Mapping[str, float] = AREA_WEIGHTS,
) -> float:
    """Sum of body-surface weights for the selected locations, clamped to [0, 100]."""
    selected = set(locations)
    total = sum(weight for location, weight in weights.items() if location in selected)
    return max(0, min(total, AREA_MAX))


def intensity_score(
    appearance: Iterable[str],
    weights: Mapping[str, float] = INTENSITY_WEIGHTS,
) -> float:
    """Sum of visual-sign weights, capped at 18."""
    selected = set(appearance)
    total = sum(weight for sign, weight in weights.items() if sign in selected)
    return min(total, INTENSITY_MAX)


def sleep_score(sleep_impact: Optional[str]) -> float:
    return SLEEP_WEIGHTS.get(norm(sleep_impact), 0)


def score_clinical(
    data: QuestionnaireData,
    area_weights: Mapping[str, float] = AREA_WEIGHTS,
    intensity_weights: Mapping[str, float] = INTENSITY_WEIGHTS,
) -> ClinicalScores:
    """
    Compute PO-SCORAD and EASI for a questionnaire.

    Args:
        data: Questionnaire snapshot
        area_weights: Location -> weight table (override for calibration)
        intensity_weights: Visual sign -> weight table

    Returns:
        ClinicalScores with both values rounded to 1 decimal
    """
    area = area_score(data.eczema_locations, area_weights)
    intensity = intensity_score(data.visual_appearance, intensity_weights)
    subjective = data.itch_score + sleep_score(data.sleep_impact)

    po_scorad = (area / 5) + (7 * (intensity / 2)) + subjective
    easi = po_scorad / EASI_RATIO

    return ClinicalScores(
        po_scorad=round(po_scorad, 1),
        easi_score=round(easi, 1),
    )
