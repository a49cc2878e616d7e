"""
Dashboard Summary

Read-only view over a user's log history: trend, counts, chart points
and a short encouragement ("mini win") comparing the last two check-ins.
"""

from typing import List, Sequence

from .models import ChartPoint, DailyLog, DashboardSummary
from .trend import analyze_symptom_trend

DEFAULT_MINI_WIN = "You showed up today. That's the biggest step."


def mini_win(logs: Sequence[DailyLog]) -> str:
    if len(logs) < 2:
        return DEFAULT_MINI_WIN

    last, prev = logs[-1], logs[-2]
    if last.stress_score < prev.stress_score:
        return "Your stress levels dropped since yesterday. The mindfulness is working."
    if last.itch_score < prev.itch_score:
        return "Itch score improved! Your barrier is calming down."
    if last.sleep_hours > prev.sleep_hours:
        return "Better sleep detected. Deep repair happens in Delta waves."
    return DEFAULT_MINI_WIN


def chart_points(logs: Sequence[DailyLog]) -> List[ChartPoint]:
    return [
        ChartPoint(
            date=log.date,
            timestamp=log.timestamp,
            itch=log.itch_score,
            stress=log.stress_score,
            redness=(log.ai_redness_score / 10) if log.ai_redness_score else None,
        )
        for log in logs
    ]


def build_dashboard_summary(logs: Sequence[DailyLog]) -> DashboardSummary:
    """Logs must be oldest first."""
    return DashboardSummary(
        trend=analyze_symptom_trend(logs),
        log_count=len(logs),
        # TODO: count consecutive calendar days instead of total check-ins
        streak=len(logs),
        photo_count=sum(log.photo_count for log in logs),
        mini_win=mini_win(logs),
        chart=chart_points(logs),
    )
