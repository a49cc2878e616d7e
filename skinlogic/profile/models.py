"""User profile aggregate owned by the record store."""

from typing import Optional

from pydantic import AliasGenerator, BaseModel
from pydantic.alias_generators import to_camel

from skinlogic.engine.models import BlendFormula, BlendStatus, ComputedProfile, QuestionnaireData
from skinlogic.mindset.models import MindsetProfile


class UserProfile(BaseModel):
    """
    One per user.

    `computed` is always derived from `questionnaire` and is replaced
    together with it; `mindset` is replaced wholesale when the quiz is retaken.
    """
    user_id: str
    name: str = ""
    skin_type: Optional[str] = None
    blend_status: BlendStatus = BlendStatus.ACTIVE
    current_formula: Optional[BlendFormula] = None
    custom_blend_name: Optional[str] = None
    questionnaire: Optional[QuestionnaireData] = None
    computed: Optional[ComputedProfile] = None
    mindset: Optional[MindsetProfile] = None

    class Config:
        use_enum_values = True
        populate_by_name = True
        alias_generator = AliasGenerator(validation_alias=to_camel)
