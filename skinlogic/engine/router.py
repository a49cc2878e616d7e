"""
Logic Engine API Endpoints

Endpoints:
- POST /engine/run        - Full ComputedProfile for a questionnaire
- POST /engine/score      - PO-SCORAD / EASI and classification only
- POST /engine/protocol   - Supplement phases with applied rule ids
- POST /engine/explain    - Per-ingredient explanations
- GET  /engine/ingredients - Ingredient catalog
- GET  /engine/health     - Module health check
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from skinlogic.config import API_PREFIX, ENGINE_VERSION
from skinlogic.shared.disclaimer import get_disclaimers
from skinlogic.shared.hashing import fingerprint

from .classifier import classify
from .ingredients import BENEFIT_HEADERS, INGREDIENT_CATALOG, explain_protocol
from .models import QuestionnaireData
from .orchestrate import run_logic_engine
from .protocol import ProtocolBuilder, build_rule_context
from .scoring import score_clinical

router = APIRouter(prefix=f"{API_PREFIX}/engine", tags=["engine"])


@router.get("/health")
def engine_health():
    return {
        "status": "ok",
        "module": "engine",
        "version": ENGINE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/run")
def engine_run(questionnaire: QuestionnaireData):
    """Run the full logic engine."""
    computed = run_logic_engine(questionnaire)
    protocol = computed.supplement_protocol
    ingredient_count = len(protocol.phase1) + len(protocol.phase2) + len(protocol.phase3)

    return {
        "status": "success",
        "engine_version": ENGINE_VERSION,
        "questionnaire_hash": fingerprint(questionnaire),
        "profile_hash": fingerprint(computed),
        "computed": computed.model_dump(),
        "disclaimers": get_disclaimers(ingredient_count),
    }


@router.post("/score")
def engine_score(questionnaire: QuestionnaireData):
    scores = score_clinical(questionnaire)
    labels = classify(scores.po_scorad, questionnaire)
    return {
        "status": "success",
        **scores.model_dump(),
        **labels.model_dump(),
    }


@router.post("/protocol")
def engine_protocol(questionnaire: QuestionnaireData):
    result = ProtocolBuilder().build(build_rule_context(questionnaire))
    return {
        "status": "success",
        "protocol": result.protocol.model_dump(),
        "applied_rules": result.applied_rules,
    }


@router.post("/explain")
def engine_explain(questionnaire: QuestionnaireData):
    computed = run_logic_engine(questionnaire)
    explanations = explain_protocol(questionnaire, computed)
    return {
        "status": "success",
        "count": len(explanations),
        "ingredients": [e.model_dump() for e in explanations],
        "disclaimers": get_disclaimers(len(explanations)),
    }


@router.get("/ingredients")
def engine_ingredients():
    return {
        "status": "success",
        "count": len(INGREDIENT_CATALOG),
        "ingredients": [
            {**item.model_dump(), "benefit_header": BENEFIT_HEADERS.get(item.category)}
            for item in INGREDIENT_CATALOG.values()
        ],
    }
