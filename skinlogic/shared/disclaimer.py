"""
SkinLogic Wellness Disclaimers
Fixed copy attached to every engine response.

RULES (LOCKED):
1. Scores are approximations of PO-SCORAD / EASI, not a diagnosis.
2. Supplement copy carries the DSHEA statement, singular or plural by
   the number of ingredients being described.
"""

from typing import Dict

NOT_MEDICAL_ADVICE = (
    "This is not medical advice. Scores are self-reported approximations of "
    "clinical indices and do not diagnose or treat any condition. Consult a "
    "healthcare provider for medical concerns."
)

PREGNANCY_NOTICE = (
    "Adaptogens are withheld from protocols when pregnancy or breastfeeding "
    "is reported or unknown."
)

DSHEA_DISCLAIMER_SINGULAR = (
    "This statement has not been evaluated by the Food and Drug Administration. "
    "This product is not intended to diagnose, treat, cure, or prevent any disease."
)

DSHEA_DISCLAIMER_PLURAL = (
    "These statements have not been evaluated by the Food and Drug Administration. "
    "This product is not intended to diagnose, treat, cure, or prevent any disease."
)

DISCLAIMER_VERSION = "disclaimer_v1.0"


def choose_supplement_disclaimer(claim_count: int) -> str:
    """
    claim_count == 1 -> "This statement..."
    otherwise        -> "These statements..."
    """
    if claim_count == 1:
        return DSHEA_DISCLAIMER_SINGULAR
    return DSHEA_DISCLAIMER_PLURAL


def get_disclaimers(claim_count: int = 2) -> Dict[str, str]:
    return {
        "not_medical_advice": NOT_MEDICAL_ADVICE,
        "pregnancy": PREGNANCY_NOTICE,
        "supplements": f"* {choose_supplement_disclaimer(claim_count)}",
        "version": DISCLAIMER_VERSION,
    }
