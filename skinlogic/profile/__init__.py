"""
SkinLogic Profile

User profile aggregate, record store seam, AI collaborator interfaces and
the service implementing onboarding, check-in and mindset flows.
"""

from .models import UserProfile
from .store import RecordStore, InMemoryRecordStore
from .collaborators import (
    DailyAnalysisResult,
    CoachToolCall,
    CoachReply,
    CoachService,
    VisionService,
    DailyInflammationService,
    SpeechService,
    analyze_daily_photo,
    apply_scan_prefill,
)
from .service import ProfileService

__all__ = [
    "UserProfile",
    "RecordStore",
    "InMemoryRecordStore",
    "DailyAnalysisResult",
    "CoachToolCall",
    "CoachReply",
    "CoachService",
    "VisionService",
    "DailyInflammationService",
    "SpeechService",
    "analyze_daily_photo",
    "apply_scan_prefill",
    "ProfileService",
]
