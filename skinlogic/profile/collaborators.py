"""
AI Collaborator Interfaces

The coach chat, vision scan, daily inflammation scorer and speech
services live outside this package. They are described here as
Protocols so the profile service can be wired against real clients or
test doubles.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from pydantic import AliasGenerator, BaseModel, Field
from pydantic.alias_generators import to_camel

from skinlogic.engine.models import ComputedProfile, QuestionnaireData

logger = logging.getLogger(__name__)


class DailyAnalysisResult(BaseModel):
    """Output of the daily photo inflammation scorer."""
    inflammation_score: float = Field(0, ge=0, le=100)
    status: str = "No Image"
    detected_locations: List[str] = Field(default_factory=list)
    detected_symptoms: List[str] = Field(default_factory=list)
    notes: str = Field("", description="Clinical observation")
    explanation: str = Field("", description="Plain-English version of notes")


NO_IMAGE_RESULT = DailyAnalysisResult(status="No Image")
ERROR_RESULT = DailyAnalysisResult(status="Error")


ADD_SUPPLEMENT_TOOL = "add_supplement_to_order"


class CoachToolCall(BaseModel):
    name: str
    args: Dict[str, Any] = Field(default_factory=dict)


class CoachReply(BaseModel):
    text: str
    tool_calls: List[CoachToolCall] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        alias_generator = AliasGenerator(validation_alias=to_camel)


class CoachService(Protocol):
    def reply(
        self,
        history: List[Dict[str, str]],
        message: str,
        questionnaire: Optional[QuestionnaireData],
        computed: Optional[ComputedProfile],
    ) -> CoachReply: ...


class VisionService(Protocol):
    def prefill_from_scan(self, images: List[str]) -> Dict[str, Any]:
        """Return a partial questionnaire (visual appearance, locations) from photos."""
        ...


class DailyInflammationService(Protocol):
    def analyze(self, image: str) -> DailyAnalysisResult: ...


class SpeechService(Protocol):
    def synthesize(self, text: str, voice: str) -> bytes: ...


def analyze_daily_photo(service: Optional[DailyInflammationService], image: Optional[str]) -> DailyAnalysisResult:
    """Run the scorer, degrading to neutral results when no image or the service fails."""
    if not image or service is None:
        return NO_IMAGE_RESULT
    try:
        return service.analyze(image)
    except Exception as e:
        logger.error(f"Daily inflammation analysis failed: {e}")
        return ERROR_RESULT


PREFILL_FIELDS = ("visual_appearance", "eczema_locations")


def apply_scan_prefill(questionnaire: QuestionnaireData, partial: Dict[str, Any]) -> QuestionnaireData:
    """
    Merge a vision prefill into a questionnaire.

    Only the scan-derived fields are taken, and only when the scan produced
    a non-empty value for them.
    """
    patch = {}
    for field in PREFILL_FIELDS:
        value = partial.get(field)
        if value is None:
            value = partial.get(to_camel(field))
        if value:
            patch[field] = value
    if not patch:
        return questionnaire
    return QuestionnaireData.model_validate({**questionnaire.model_dump(), **patch})

