"""Mindset program models."""

from enum import Enum
from typing import Dict, List

from pydantic import AliasGenerator, BaseModel, Field
from pydantic.alias_generators import to_camel


class MindsetPersona(str, Enum):
    FIGHTER = "The Fighter"
    HIDER = "The Hider"
    HOPELESS_HEALER = "The Hopeless Healer"
    WOUNDED_INNER_CHILD = "The Wounded Inner Child"
    BURNT_OUT_OVERTHINKER = "The Burnt-Out Overthinker"


class QuizQuestion(BaseModel):
    id: str
    text: str
    options: List[str]

    class Config:
        frozen = True


class DayPlan(BaseModel):
    title: str
    morning: str
    evening: str

    class Config:
        frozen = True


class MindsetModule(BaseModel):
    id: str
    title: str
    description: str
    aim: str
    tags: List[str]
    audio: str
    days: List[DayPlan]

    class Config:
        frozen = True

    @property
    def day_count(self) -> int:
        return len(self.days)


class QuizResult(BaseModel):
    persona: MindsetPersona
    module_id: str

    class Config:
        use_enum_values = True
        frozen = True


class MindsetProfile(BaseModel):
    """
    Persona-driven program state.

    Replaced wholesale when the quiz is retaken; otherwise only advanced
    by daily task completion.
    """
    persona: MindsetPersona
    assigned_module_id: str
    start_date: str = Field(..., description="ISO timestamp")
    current_day: int = Field(1, ge=1)
    completed_days: List[str] = Field(default_factory=list, description="ISO dates")
    quiz_answers: Dict[str, str] = Field(default_factory=dict)
    streak: int = Field(0, ge=0)

    class Config:
        use_enum_values = True
        populate_by_name = True
        alias_generator = AliasGenerator(validation_alias=to_camel)
