"""
Mindset API Endpoints

Endpoints:
- GET  /mindset/quiz               - Quiz question bank
- GET  /mindset/modules            - Module catalog
- GET  /mindset/modules/{module_id} - Single module with day plans
- POST /mindset/analyze            - Persona + module for quiz answers
"""

from typing import Dict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from skinlogic.config import API_PREFIX
from skinlogic.shared.errors import QuizValidationError, UnknownModuleError

from .content import MINDSET_MODULES, QUIZ_QUESTIONS
from .progress import get_module, start_mindset_profile
from .persona import validate_quiz_answers

router = APIRouter(prefix=f"{API_PREFIX}/mindset", tags=["mindset"])


class QuizAnswersRequest(BaseModel):
    answers: Dict[str, str] = Field(default_factory=dict)


@router.get("/quiz")
def mindset_quiz():
    return {
        "status": "success",
        "count": len(QUIZ_QUESTIONS),
        "questions": [q.model_dump() for q in QUIZ_QUESTIONS],
    }


@router.get("/modules")
def mindset_modules():
    return {
        "status": "success",
        "count": len(MINDSET_MODULES),
        "modules": [
            {**m.model_dump(exclude={"days"}), "day_count": m.day_count}
            for m in MINDSET_MODULES.values()
        ],
    }


@router.get("/modules/{module_id}")
def mindset_module(module_id: str):
    try:
        module = get_module(module_id)
    except UnknownModuleError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "success", "module": module.model_dump()}


@router.post("/analyze")
def mindset_analyze(request: QuizAnswersRequest):
    """Classify quiz answers and return the starting program state."""
    try:
        answers = validate_quiz_answers(request.answers)
    except QuizValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "Invalid quiz answers", "errors": e.errors},
        )

    profile = start_mindset_profile(answers)
    module = get_module(profile.assigned_module_id)
    return {
        "status": "success",
        "persona": profile.persona,
        "module_id": profile.assigned_module_id,
        "module_title": module.title,
        "profile": profile.model_dump(),
    }
