"""
Tracking API Endpoints

Endpoints:
- POST /tracking/trend     - Symptom trend for a log history
- POST /tracking/dashboard - Dashboard summary for a log history
"""

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from skinlogic.config import API_PREFIX

from .dashboard import build_dashboard_summary
from .models import DailyLog, sort_logs
from .trend import analyze_symptom_trend

router = APIRouter(prefix=f"{API_PREFIX}/tracking", tags=["tracking"])


class LogHistoryRequest(BaseModel):
    logs: List[DailyLog] = Field(default_factory=list)


@router.post("/trend")
def tracking_trend(request: LogHistoryRequest):
    result = analyze_symptom_trend(sort_logs(request.logs))
    return {"status": "success", "trend": result.model_dump()}


@router.post("/dashboard")
def tracking_dashboard(request: LogHistoryRequest):
    summary = build_dashboard_summary(sort_logs(request.logs))
    return {"status": "success", "dashboard": summary.model_dump(mode="json")}
