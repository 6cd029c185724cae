"""Dashboard, budget and streak API routes."""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.schemas.dashboard import (
    BudgetSummaryRequest,
    BudgetSummaryResponse,
    DashboardSummaryRequest,
    DashboardSummaryResponse,
    StreakAdvanceRequest,
    StreakResetRequest,
    StreakResponse,
)
from app.core.clock import get_timezone, local_now, local_today
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.dashboard_service import build_budget_summary, build_dashboard_summary
from app.services.study_streak import advance_streak, reset_current_streak

router = APIRouter()


@router.post("/dashboard/summary", response_model=DashboardSummaryResponse, tags=["dashboard"])
def dashboard_summary(payload: DashboardSummaryRequest, request: Request) -> DashboardSummaryResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("dashboard.summary", metadata={"route": "/dashboard/summary"}, request_id=request_id):
        summary = build_dashboard_summary(
            payload.tasks,
            payload.sessions,
            payload.expenses,
            payload.streak,
            payload.weekly_budget,
            now=local_now(),
            tz=get_timezone(),
        )

    log_metric("dashboard.tasks_due_today", summary.tasks_due_today)
    return DashboardSummaryResponse(**summary.model_dump(), request_id=request_id or "")


@router.post("/dashboard/budget", response_model=BudgetSummaryResponse, tags=["dashboard"])
def budget_summary(payload: BudgetSummaryRequest, request: Request) -> BudgetSummaryResponse:
    request_id = getattr(request.state, "request_id", None)
    with trace("dashboard.budget", metadata={"route": "/dashboard/budget"}, request_id=request_id):
        summary = build_budget_summary(payload.expenses, payload.weekly_budget, today=local_today())

    log_metric("dashboard.budget.over_budget", 1 if summary.over_budget else 0)
    return BudgetSummaryResponse(**summary.model_dump(), request_id=request_id or "")


@router.post("/streaks/advance", response_model=StreakResponse, tags=["streaks"])
def streak_advance(payload: StreakAdvanceRequest, request: Request) -> StreakResponse:
    """Apply a completed study session to the caller's streak snapshot."""
    request_id = getattr(request.state, "request_id", None)
    completed_on = payload.completed_on or local_today()
    with trace("streaks.advance", metadata={"route": "/streaks/advance"}, request_id=request_id):
        streak = advance_streak(payload.streak, completed_on)

    log_metric("streaks.current", streak.current_streak)
    return StreakResponse(**streak.model_dump(), request_id=request_id or "")


@router.post("/streaks/reset", response_model=StreakResponse, tags=["streaks"])
def streak_reset(payload: StreakResetRequest, request: Request) -> StreakResponse:
    """Zero the current streak; the longest streak is kept."""
    request_id = getattr(request.state, "request_id", None)
    with trace("streaks.reset", metadata={"route": "/streaks/reset"}, request_id=request_id):
        streak = reset_current_streak(payload.streak)

    log_metric("streaks.reset", 1, metadata={"previous": payload.streak.current_streak})
    return StreakResponse(**streak.model_dump(), request_id=request_id or "")
