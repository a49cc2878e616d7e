"""Shared fixtures for the SkinLogic test suite."""

from datetime import date, timedelta

import pytest

from skinlogic.engine.models import QuestionnaireData
from skinlogic.tracking.models import DailyLog

START_DATE = date(2026, 1, 1)


def make_log(day: int, itch: float, stress: float = 5, **extra) -> DailyLog:
    """Check-in `day` days after START_DATE."""
    return DailyLog(
        id=f"log-{day}",
        date=START_DATE + timedelta(days=day),
        itch_score=itch,
        stress_score=stress,
        **extra,
    )


def make_logs(itch_scores, **extra):
    return [make_log(i, itch, **extra) for i, itch in enumerate(itch_scores)]


@pytest.fixture
def empty_questionnaire():
    """Everything left blank: only the defaults apply."""
    return QuestionnaireData()


@pytest.fixture
def sam_questionnaire():
    """Dry skin, high stress, steroid user with gut symptoms."""
    return QuestionnaireData(
        full_name="Sam Doe",
        age=30,
        biological_sex="Female",
        pregnancy_status="None",
        skin_type="Dry/Cracked",
        eczema_onset="Childhood",
        eczema_locations=["Arms", "Neck"],
        visual_appearance=["Red", "Dry"],
        scratch_timing=["Night (Sleep)"],
        shower_temp="Hot (Steaming)",
        pets=["Cat"],
        diet_style="Standard",
        suspected_triggers=["Dairy"],
        gut_health="Bloating",
        hydration="1-2L",
        smoking="Never",
        perceived_stress="High",
        itch_score=7,
        sleep_impact="Moderate",
        medication_usage="Topical Steroids",
        exercise_level="Moderate",
        primary_goal=["Stop Itch", "Sleep Better"],
    )


@pytest.fixture
def sam_payload():
    """Camel-cased client payload equivalent to sam_questionnaire."""
    return {
        "fullName": "Sam Doe",
        "age": 30,
        "biologicalSex": "Female",
        "pregnancyStatus": "None",
        "skinType": "Dry/Cracked",
        "eczemaOnset": "Childhood",
        "eczemaLocations": ["Arms", "Neck"],
        "visualAppearance": ["Red", "Dry"],
        "scratchTiming": ["Night (Sleep)"],
        "showerTemp": "Hot (Steaming)",
        "pets": ["Cat"],
        "dietStyle": "Standard",
        "suspectedTriggers": ["Dairy"],
        "gutHealth": "Bloating",
        "hydration": "1-2L",
        "smoking": "Never",
        "perceivedStress": "High",
        "itchScore": 7,
        "sleepImpact": "Moderate",
        "medicationUsage": "Topical Steroids",
        "exerciseLevel": "Moderate",
        "primaryGoal": ["Stop Itch", "Sleep Better"],
    }
