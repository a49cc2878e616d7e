"""
Profile Service
===============
User-facing flows on top of the pure engine and the record store:

- complete_onboarding: questionnaire -> computed profile + starter formula
- update_questionnaire: edit -> full recompute (never a field patch)
- apply_coach_tool_calls: formula additions requested by the AI coach
- record_check_in: append a daily log, optionally scored from a photo
- get_trend / get_dashboard: analytics over the sorted log history
- complete_quiz / complete_task: mindset program state
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Mapping, Optional

from skinlogic.engine.formula import (
    STARTER_BASE,
    STARTER_FLAVOR,
    add_supplement_to_formula,
    build_starter_formula,
    default_blend_name,
)
from skinlogic.engine.ingredients import IngredientExplanation, explain_protocol
from skinlogic.engine.models import BlendFormula, QuestionnaireData
from skinlogic.engine.orchestrate import run_logic_engine
from skinlogic.mindset.models import MindsetProfile
from skinlogic.mindset.persona import validate_quiz_answers
from skinlogic.mindset.progress import complete_daily_task, start_mindset_profile
from skinlogic.shared.errors import (
    MindsetNotStartedError,
    ProfileNotFoundError,
    QuestionnaireMissingError,
)
from skinlogic.tracking.dashboard import build_dashboard_summary
from skinlogic.tracking.models import DailyLog, DashboardSummary, TrendResult, sort_logs
from skinlogic.tracking.trend import analyze_symptom_trend

from .collaborators import (
    ADD_SUPPLEMENT_TOOL,
    CoachToolCall,
    DailyInflammationService,
    analyze_daily_photo,
)
from .models import UserProfile
from .store import RecordStore

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(
        self,
        store: RecordStore,
        inflammation_service: Optional[DailyInflammationService] = None,
    ):
        self.store = store
        self.inflammation_service = inflammation_service

    def _require_profile(self, user_id: str) -> UserProfile:
        profile = self.store.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    # =========================================================================
    # ONBOARDING / QUESTIONNAIRE
    # =========================================================================

    def complete_onboarding(
        self,
        user_id: str,
        questionnaire: QuestionnaireData,
        blend_name: Optional[str] = None,
    ) -> UserProfile:
        computed = run_logic_engine(questionnaire)
        name = blend_name or default_blend_name(questionnaire.full_name)

        existing = self.store.get_profile(user_id)
        profile = UserProfile(
            user_id=user_id,
            name=questionnaire.full_name,
            skin_type=questionnaire.skin_type,
            current_formula=build_starter_formula(computed, name=name),
            custom_blend_name=name,
            questionnaire=questionnaire,
            computed=computed,
            mindset=existing.mindset if existing else None,
        )
        self.store.upsert_profile(user_id, profile)
        logger.info(
            f"Onboarding complete for {user_id}: severity={computed.severity_class} "
            f"phase1={len(computed.supplement_protocol.phase1)} ingredients"
        )
        return profile

    def update_questionnaire(self, user_id: str, questionnaire: QuestionnaireData) -> UserProfile:
        """Replace questionnaire and computed profile together. The formula is kept."""
        profile = self._require_profile(user_id)
        computed = run_logic_engine(questionnaire)
        updated = profile.model_copy(
            update={
                "name": questionnaire.full_name or profile.name,
                "skin_type": questionnaire.skin_type,
                "questionnaire": questionnaire,
                "computed": computed,
            }
        )
        self.store.upsert_profile(user_id, updated)
        logger.info(f"Recomputed profile for {user_id}: severity={computed.severity_class}")
        return updated

    def explain(self, user_id: str) -> List[IngredientExplanation]:
        profile = self._require_profile(user_id)
        if profile.questionnaire is None or profile.computed is None:
            raise QuestionnaireMissingError(user_id)
        return explain_protocol(profile.questionnaire, profile.computed)

    def apply_coach_tool_calls(self, user_id: str, tool_calls: Iterable[CoachToolCall]) -> List[str]:
        """
        Apply the coach's formula actions and return user-facing feedback.

        Only add_supplement_to_order is understood; other tools are skipped.
        """
        profile = self._require_profile(user_id)
        original = profile.current_formula or BlendFormula(base=STARTER_BASE, flavor=STARTER_FLAVOR)
        formula = original
        feedback: List[str] = []

        for call in tool_calls:
            if call.name != ADD_SUPPLEMENT_TOOL:
                logger.debug(f"Ignoring coach tool {call.name}")
                continue
            formula, message = add_supplement_to_formula(formula, str(call.args.get("supplement_name", "")))
            if message:
                feedback.append(message)

        if formula is not original:
            self.store.upsert_profile(user_id, profile.model_copy(update={"current_formula": formula}))
            logger.info(f"Coach updated formula for {user_id}: {len(formula.additives)} additives")
        return feedback

    # =========================================================================
    # TRACKING
    # =========================================================================

    def record_check_in(self, user_id: str, log: DailyLog) -> DailyLog:
        """
        Append a check-in. When a photo is attached and the log carries no
        AI score yet, the daily inflammation service fills it in.
        """
        self._require_profile(user_id)

        image = log.images[0] if log.images else log.photo_url
        if image and log.ai_redness_score is None:
            result = analyze_daily_photo(self.inflammation_service, image)
            if result.status not in ("Error", "No Image"):
                log = log.model_copy(
                    update={
                        "ai_redness_score": result.inflammation_score,
                        "ai_locations": result.detected_locations,
                        "ai_symptoms": result.detected_symptoms,
                        "ai_explanation": result.explanation or None,
                        "notes": log.notes or result.notes or None,
                    }
                )

        self.store.insert_log(user_id, log)
        return log

    def list_logs(self, user_id: str) -> List[DailyLog]:
        return sort_logs(self.store.list_logs(user_id))

    def get_trend(self, user_id: str) -> TrendResult:
        return analyze_symptom_trend(self.list_logs(user_id))

    def get_dashboard(self, user_id: str) -> DashboardSummary:
        return build_dashboard_summary(self.list_logs(user_id))

    # =========================================================================
    # MINDSET
    # =========================================================================

    def complete_quiz(
        self,
        user_id: str,
        answers: Mapping[str, str],
        now: Optional[datetime] = None,
    ) -> MindsetProfile:
        profile = self._require_profile(user_id)
        mindset = start_mindset_profile(validate_quiz_answers(answers), now)
        self.store.upsert_profile(user_id, profile.model_copy(update={"mindset": mindset}))
        return mindset

    def complete_task(self, user_id: str, today: Optional[date] = None) -> MindsetProfile:
        profile = self._require_profile(user_id)
        if profile.mindset is None:
            raise MindsetNotStartedError(user_id)

        mindset = complete_daily_task(profile.mindset, today)
        if mindset is not profile.mindset:
            self.store.upsert_profile(user_id, profile.model_copy(update={"mindset": mindset}))
            logger.info(f"Mindset task done for {user_id}: day {mindset.current_day}, streak {mindset.streak}")
        return mindset
