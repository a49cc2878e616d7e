"""
SkinLogic Logic Engine

Questionnaire -> ComputedProfile:
- Clinical scorer (PO-SCORAD / EASI)
- Classifier (severity, psychoderm profile, inflammation)
- Root-cause summarizer
- Protocol builder (three de-duplicated phases)
- Mindset roadmap selector
- Nutrition / lifestyle suggestions

All functions are pure and deterministic.
"""

from .models import (
    SkinType,
    PerceivedStress,
    SleepImpact,
    SeverityClass,
    PsychodermProfile,
    InflammationLevel,
    QuestionnaireData,
    ClinicalScores,
    Classification,
    SupplementProtocol,
    MindsetRoadmap,
    ComputedProfile,
    BlendStatus,
    BlendFormula,
    SupplementAdditive,
)
from .scoring import score_clinical
from .classifier import classify
from .root_cause import summarize_root_cause
from .protocol import ProtocolBuilder, build_protocol
from .roadmap import select_mindset_roadmap
from .suggestions import nutrition_suggestions, lifestyle_tips
from .orchestrate import run_logic_engine
from .ingredients import explain_ingredient, explain_protocol, INGREDIENT_CATALOG
from .formula import build_starter_formula, add_supplement_to_formula

__all__ = [
    # Models
    "SkinType",
    "PerceivedStress",
    "SleepImpact",
    "SeverityClass",
    "PsychodermProfile",
    "InflammationLevel",
    "QuestionnaireData",
    "ClinicalScores",
    "Classification",
    "SupplementProtocol",
    "MindsetRoadmap",
    "ComputedProfile",
    "BlendStatus",
    "BlendFormula",
    "SupplementAdditive",
    # Functions
    "score_clinical",
    "classify",
    "summarize_root_cause",
    "ProtocolBuilder",
    "build_protocol",
    "select_mindset_roadmap",
    "nutrition_suggestions",
    "lifestyle_tips",
    "run_logic_engine",
    "explain_ingredient",
    "explain_protocol",
    "INGREDIENT_CATALOG",
    "build_starter_formula",
    "add_supplement_to_formula",
]
