"""
Symptom Trend Analyzer

Fits an ordinary-least-squares line through a composite clinical score of
the most recent logs and classifies its slope:

    score = (ai_redness / 10) * 0.6 + itch * 0.4   if ai_redness > 0
    score = itch                                   otherwise

    slope = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2),  x = 0..n-1

    slope < -0.15 -> Improving
    slope >  0.15 -> Worsening
    otherwise     -> Plateau

Fewer than 3 logs -> Calibrating.
"""

from typing import Sequence

from .models import DailyLog, TrendResult, TrendStatus

MIN_LOGS = 3
WINDOW = 7
SLOPE_THRESHOLD = 0.15

REDNESS_WEIGHT = 0.6
ITCH_WEIGHT = 0.4

CALIBRATING = TrendResult(
    status=TrendStatus.CALIBRATING,
    color="text-slate-500",
    advice="Keep logging. We need a few more days to learn your flare patterns.",
    action="Track Daily",
)

_IMPROVING = dict(
    status=TrendStatus.IMPROVING,
    color="text-green-600",
    advice="The protocol is working. Inflammation velocity is dropping.",
    action="Continue Phase 1",
)

_WORSENING = dict(
    status=TrendStatus.WORSENING,
    color="text-rose-600",
    advice="Inflammation is accelerating. Check food triggers.",
    action="Use SOS Audio",
)

_PLATEAU = dict(
    status=TrendStatus.PLATEAU,
    color="text-amber-600",
    advice="Healing has stabilized. Stick to the routine.",
    action="Check Adherence",
)


def clinical_score(log: DailyLog) -> float:
    if log.ai_redness_score is not None and log.ai_redness_score > 0:
        return (log.ai_redness_score / 10) * REDNESS_WEIGHT + log.itch_score * ITCH_WEIGHT
    return log.itch_score


def regression_slope(values: Sequence[float]) -> float:
    """Closed-form OLS slope of values against their 0-based index."""
    n = len(values)
    sum_x = sum_y = sum_xy = sum_xx = 0.0
    for x, y in enumerate(values):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x
    return (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)


def analyze_symptom_trend(logs: Sequence[DailyLog]) -> TrendResult:
    """
    Classify symptom direction from chronologically ordered logs.

    Args:
        logs: Oldest first; only the last 7 are used

    Returns:
        TrendResult with status, advice, action and the fitted slope
    """
    if len(logs) < MIN_LOGS:
        return CALIBRATING

    recent = list(logs)[-WINDOW:]
    slope = regression_slope([clinical_score(log) for log in recent])

    if slope < -SLOPE_THRESHOLD:
        outcome = _IMPROVING
    elif slope > SLOPE_THRESHOLD:
        outcome = _WORSENING
    else:
        outcome = _PLATEAU

    return TrendResult(**outcome, slope=round(slope, 4), window=len(recent))
