"""Mindset program progression: quiz completion and daily task check-off."""

import logging
from datetime import date, datetime, timezone
from typing import Mapping, Optional

from skinlogic.shared.errors import UnknownModuleError

from .content import MINDSET_MODULES
from .models import DayPlan, MindsetModule, MindsetProfile
from .persona import analyze_mindset_quiz

logger = logging.getLogger(__name__)


def get_module(module_id: str) -> MindsetModule:
    try:
        return MINDSET_MODULES[module_id]
    except KeyError:
        raise UnknownModuleError(module_id) from None


def start_mindset_profile(
    answers: Mapping[str, str],
    now: Optional[datetime] = None,
) -> MindsetProfile:
    """Create a fresh profile from quiz answers. Retaking the quiz replaces the old one."""
    now = now or datetime.now(timezone.utc)
    result = analyze_mindset_quiz(answers)
    logger.info(f"Mindset quiz resolved to {result.persona} ({result.module_id})")
    return MindsetProfile(
        persona=result.persona,
        assigned_module_id=result.module_id,
        start_date=now.isoformat(),
        current_day=1,
        completed_days=[],
        quiz_answers=dict(answers),
        streak=0,
    )


def complete_daily_task(profile: MindsetProfile, today: Optional[date] = None) -> MindsetProfile:
    """
    Mark today's task done.

    At most one completion per calendar day: a second call on the same day
    returns the profile unchanged. The day counter stops at the module length.
    """
    day = (today or date.today()).isoformat()
    if day in profile.completed_days:
        return profile

    module = get_module(profile.assigned_module_id)
    return profile.model_copy(
        update={
            "completed_days": [*profile.completed_days, day],
            "streak": profile.streak + 1,
            "current_day": min(profile.current_day + 1, module.day_count),
        }
    )


def current_day_plan(profile: MindsetProfile) -> DayPlan:
    module = get_module(profile.assigned_module_id)
    index = min(profile.current_day, module.day_count) - 1
    return module.days[index]
