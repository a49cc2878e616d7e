"""
SkinLogic Engine Models

Questionnaire input and ComputedProfile output of the logic engine.

Bucket fields with a closed vocabulary (skin type, perceived stress,
sleep impact) are enums normalized once at ingestion. Other buckets keep
the client's string and are compared case-insensitively by the engine.
Both snake_case and the clients' camelCase keys are accepted on input.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import AliasGenerator, BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS
# =============================================================================

class SkinType(str, Enum):
    DRY = "Dry/Cracked"
    WEEPING = "Weeping"
    INFLAMED = "Red/Inflamed"
    NORMAL = "Maintenance"
    COMBINATION = "Combination"
    OILY = "Oily"


class PerceivedStress(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    OVERWHELMED = "Overwhelmed"


class SleepImpact(str, Enum):
    NONE = "None"
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"


class SeverityClass(str, Enum):
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    HIGH_RISK = "High-Risk"


class PsychodermProfile(str, Enum):
    RESILIENT = "Resilient"
    STRESS_REACTIVE = "Stress-Reactive"
    AVOIDANT = "Avoidant"
    SHAME_PRONE = "Shame-Prone"


class InflammationLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


def _coerce_enum(enum_cls, value: Any):
    """Match by value or member name, ignoring case. Empty input -> None."""
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().casefold()
        if not key:
            return None
        for member in enum_cls:
            if key in (member.value.casefold(), member.name.casefold()):
                return member
    return value


# Multi-select "None" options carry no signal.
_EMPTY_SENTINELS = {"none", ""}


# =============================================================================
# QUESTIONNAIRE
# =============================================================================

class QuestionnaireData(BaseModel):
    """Self-reported clinical and lifestyle snapshot collected at onboarding."""

    # --- Initial scan ---
    scan_images: List[str] = Field(default_factory=list)

    # --- Identity / biometrics ---
    full_name: str = ""
    age: Optional[int] = Field(None, ge=0, le=120)
    biological_sex: str = ""
    pregnancy_status: str = ""  # None, Pregnant, Breastfeeding
    height: Optional[float] = Field(None, ge=0, description="cm")
    weight: Optional[float] = Field(None, ge=0, description="kg")

    # --- Skin profile ---
    skin_type: Optional[SkinType] = None
    eczema_onset: str = ""  # Childhood, Adulthood, Recent (<6 months)
    eczema_locations: List[str] = Field(default_factory=list)
    visual_appearance: List[str] = Field(default_factory=list)
    atopic_history: List[str] = Field(default_factory=list)
    scratch_timing: List[str] = Field(default_factory=list)

    # --- Environment ---
    shower_temp: str = ""
    moisturizer_texture: str = ""
    clothing_fabrics: List[str] = Field(default_factory=list)
    laundry_detergent: str = ""
    pets: List[str] = Field(default_factory=list)
    climate: str = ""
    sun_effect: str = ""
    sweat_trigger: str = ""

    # --- Internal ---
    diet_style: str = ""
    suspected_triggers: List[str] = Field(default_factory=list)
    gut_health: str = ""
    antibiotic_use: bool = False
    hydration: str = ""
    smoking: str = ""
    alcohol: str = ""

    # --- Psychological ---
    perceived_stress: Optional[PerceivedStress] = None
    itch_score: int = Field(1, ge=1, le=10)
    sleep_impact: Optional[SleepImpact] = None
    mental_impact: List[str] = Field(default_factory=list)

    # --- Safety & goals ---
    medication_usage: str = ""
    steroid_usage_history: str = ""
    exercise_level: str = ""
    bone_joint_health: List[str] = Field(default_factory=list)
    primary_goal: List[str] = Field(default_factory=list)

    # --- Legacy fields still read by ingredient explanations ---
    confirmed_deficiencies: List[str] = Field(default_factory=list)
    deficiency_symptoms: List[str] = Field(default_factory=list)

    @field_validator("skin_type", mode="before")
    @classmethod
    def normalize_skin_type(cls, v):
        return _coerce_enum(SkinType, v)

    @field_validator("perceived_stress", mode="before")
    @classmethod
    def normalize_stress(cls, v):
        return _coerce_enum(PerceivedStress, v)

    @field_validator("sleep_impact", mode="before")
    @classmethod
    def normalize_sleep_impact(cls, v):
        return _coerce_enum(SleepImpact, v)

    @field_validator(
        "eczema_locations", "visual_appearance", "atopic_history",
        "scratch_timing", "clothing_fabrics", "pets", "suspected_triggers",
        "mental_impact", "bone_joint_health", "primary_goal",
        mode="before",
    )
    @classmethod
    def drop_none_option(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [item for item in v if str(item).strip().casefold() not in _EMPTY_SENTINELS]

    class Config:
        use_enum_values = True
        frozen = True
        populate_by_name = True
        alias_generator = AliasGenerator(validation_alias=to_camel)
        json_schema_extra = {
            "example": {
                "full_name": "Sam Doe",
                "age": 30,
                "biological_sex": "Female",
                "pregnancy_status": "None",
                "skin_type": "Dry/Cracked",
                "eczema_onset": "Childhood",
                "eczema_locations": ["Arms", "Neck"],
                "visual_appearance": ["Red", "Dry"],
                "scratch_timing": ["Night (Sleep)"],
                "shower_temp": "Hot (Steaming)",
                "pets": ["Cat"],
                "diet_style": "Standard",
                "suspected_triggers": ["Dairy"],
                "gut_health": "Bloating",
                "hydration": "1-2L",
                "smoking": "Never",
                "perceived_stress": "High",
                "itch_score": 7,
                "sleep_impact": "Moderate",
                "medication_usage": "Topical Steroids",
                "exercise_level": "Moderate",
                "primary_goal": ["Stop Itch", "Sleep Better"],
            }
        }


# =============================================================================
# ENGINE OUTPUT
# =============================================================================

class ClinicalScores(BaseModel):
    po_scorad: float
    easi_score: float

    class Config:
        frozen = True


class Classification(BaseModel):
    severity_class: SeverityClass
    psychoderm_profile: PsychodermProfile
    inflammation_level: InflammationLevel

    class Config:
        use_enum_values = True
        frozen = True


class SupplementProtocol(BaseModel):
    """Three ordered, de-duplicated ingredient phases."""
    phase1: List[str] = Field(default_factory=list, description="Immediate")
    phase2: List[str] = Field(default_factory=list, description="Secondary")
    phase3: List[str] = Field(default_factory=list, description="Maintenance / optional")

    class Config:
        frozen = True


class MindsetRoadmap(BaseModel):
    sos: str
    sleep_support: str
    cbt_pathway: str

    class Config:
        frozen = True


class ComputedProfile(BaseModel):
    """
    Derived result of run_logic_engine().

    Never patched field by field: a questionnaire edit produces a new one.
    """
    severity_class: SeverityClass
    po_scorad: float
    easi_score: float
    psychoderm_profile: PsychodermProfile
    inflammation_level: InflammationLevel
    root_cause_summary: str
    supplement_protocol: SupplementProtocol
    mindset_roadmap: MindsetRoadmap
    nutrition_suggestions: List[str] = Field(default_factory=list)
    lifestyle_tips: List[str] = Field(default_factory=list)

    class Config:
        use_enum_values = True
        frozen = True


# =============================================================================
# FORMULA
# =============================================================================

class BlendStatus(str, Enum):
    ACTIVE = "Active"


class SupplementAdditive(BaseModel):
    name: str
    dose: str


class BlendFormula(BaseModel):
    base: str
    additives: List[SupplementAdditive] = Field(default_factory=list)
    flavor: str = ""
    name: Optional[str] = None
