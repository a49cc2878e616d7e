"""
SkinLogic Mindset Program

Persona quiz, 7-day content modules and daily task progression.
"""

from .models import (
    MindsetPersona,
    QuizQuestion,
    DayPlan,
    MindsetModule,
    QuizResult,
    MindsetProfile,
)
from .content import QUIZ_QUESTIONS, MINDSET_MODULES
from .persona import analyze_mindset_quiz, validate_quiz_answers
from .progress import get_module, start_mindset_profile, complete_daily_task, current_day_plan

__all__ = [
    "MindsetPersona",
    "QuizQuestion",
    "DayPlan",
    "MindsetModule",
    "QuizResult",
    "MindsetProfile",
    "QUIZ_QUESTIONS",
    "MINDSET_MODULES",
    "analyze_mindset_quiz",
    "validate_quiz_answers",
    "get_module",
    "start_mindset_profile",
    "complete_daily_task",
    "current_day_plan",
]
