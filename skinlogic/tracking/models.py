"""
Tracking Models

DailyLog is an append-only check-in record. Logs are ordered by their
precise timestamp when present, otherwise by calendar date.
"""

import re
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import AliasGenerator, BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

_LEGACY_MOOD = re.compile(r"^\[Mood: (.*?)\]\s*(.*)$", re.DOTALL)


def split_legacy_mood(notes: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Older clients stored the mood inside notes as "[Mood: X] rest".

    Returns (mood, notes) with the prefix removed, or (None, notes)
    when there is no prefix.
    """
    if not notes:
        return None, notes
    match = _LEGACY_MOOD.match(notes)
    if not match:
        return None, notes
    return match.group(1), match.group(2)


class DailyLog(BaseModel):
    id: str
    date: date
    timestamp: Optional[datetime] = None
    itch_score: float = Field(..., ge=1, le=10)
    stress_score: float = Field(..., ge=1, le=10)
    sleep_hours: float = Field(0, ge=0, le=24)
    mood: Optional[str] = None
    photo_url: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    ai_redness_score: Optional[float] = Field(None, ge=0, le=100)
    ai_locations: List[str] = Field(default_factory=list)
    ai_symptoms: List[str] = Field(default_factory=list)
    ai_explanation: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True
        alias_generator = AliasGenerator(validation_alias=to_camel)

    @model_validator(mode="before")
    @classmethod
    def recover_legacy_mood(cls, data):
        if not isinstance(data, dict) or data.get("mood"):
            return data
        mood, notes = split_legacy_mood(data.get("notes"))
        if mood is None:
            return data
        return {**data, "mood": mood, "notes": notes}

    @property
    def sort_key(self) -> datetime:
        if self.timestamp is not None:
            ts = self.timestamp
            return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)
        return datetime.combine(self.date, time.min, tzinfo=timezone.utc)

    @property
    def photo_count(self) -> int:
        if self.images:
            return len(self.images)
        return 1 if self.photo_url else 0


class TrendStatus(str, Enum):
    CALIBRATING = "Calibrating"
    IMPROVING = "Improving"
    WORSENING = "Worsening"
    PLATEAU = "Plateau"


class TrendResult(BaseModel):
    status: TrendStatus
    advice: str
    action: str
    color: Optional[str] = Field(None, description="Display hint")
    slope: Optional[float] = None
    window: int = 0

    class Config:
        use_enum_values = True
        frozen = True


class ChartPoint(BaseModel):
    date: date
    timestamp: Optional[datetime] = None
    itch: float
    stress: float
    redness: Optional[float] = Field(None, description="AI redness on the 0-10 itch scale")


class DashboardSummary(BaseModel):
    trend: TrendResult
    log_count: int
    streak: int
    photo_count: int
    mini_win: str
    chart: List[ChartPoint] = Field(default_factory=list)


def sort_logs(logs: List[DailyLog]) -> List[DailyLog]:
    """Chronological order; stable for logs sharing a key."""
    return sorted(logs, key=lambda log: log.sort_key)
