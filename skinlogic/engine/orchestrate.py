"""
SkinLogic Orchestrator

run_logic_engine() sequences the engine phases into one ComputedProfile:

    score -> classify -> root cause -> protocol -> roadmap -> suggestions

IMPORTANT: Pure and deterministic. Same questionnaire, same profile.
"""

import logging

from skinlogic.shared.hashing import fingerprint

from .classifier import classify
from .models import ComputedProfile, QuestionnaireData
from .protocol import ProtocolBuilder, build_rule_context
from .roadmap import select_mindset_roadmap
from .root_cause import summarize_root_cause
from .scoring import score_clinical
from .suggestions import lifestyle_tips, nutrition_suggestions

logger = logging.getLogger(__name__)


def run_logic_engine(data: QuestionnaireData) -> ComputedProfile:
    scores = score_clinical(data)
    labels = classify(scores.po_scorad, data)
    root_cause = summarize_root_cause(data)

    ctx = build_rule_context(
        data,
        inflammation=labels.inflammation_level,
        psychoderm=labels.psychoderm_profile,
    )
    protocol = ProtocolBuilder().build(ctx).protocol
    roadmap = select_mindset_roadmap(data, labels.psychoderm_profile)

    computed = ComputedProfile(
        severity_class=labels.severity_class,
        po_scorad=scores.po_scorad,
        easi_score=scores.easi_score,
        psychoderm_profile=labels.psychoderm_profile,
        inflammation_level=labels.inflammation_level,
        root_cause_summary=root_cause,
        supplement_protocol=protocol,
        mindset_roadmap=roadmap,
        nutrition_suggestions=nutrition_suggestions(data),
        lifestyle_tips=lifestyle_tips(data),
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Logic engine: po_scorad={scores.po_scorad} severity={labels.severity_class} "
            f"profile={fingerprint(computed)}"
        )
    return computed
