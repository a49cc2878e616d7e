"""
SkinLogic Tracking

Daily check-in logs, symptom trend analysis and dashboard summary.
"""

from .models import (
    DailyLog,
    TrendStatus,
    TrendResult,
    ChartPoint,
    DashboardSummary,
    sort_logs,
    split_legacy_mood,
)
from .trend import analyze_symptom_trend, clinical_score, regression_slope
from .dashboard import build_dashboard_summary, mini_win

__all__ = [
    "DailyLog",
    "TrendStatus",
    "TrendResult",
    "ChartPoint",
    "DashboardSummary",
    "sort_logs",
    "analyze_symptom_trend",
    "clinical_score",
    "regression_slope",
    "build_dashboard_summary",
    "mini_win",
    "split_legacy_mood",
]
