"""Aggregation helpers for dashboard and budget endpoints."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from app.api.schemas.dashboard import (
    BUDGET_CATEGORIES,
    BudgetEntry,
    BudgetSummary,
    DashboardSummary,
    StudySession,
    Streak,
)
from app.api.schemas.task import Task

TODAY_TASK_LIMIT = 5
_UTC = ZoneInfo("UTC")


def week_start(today: date) -> date:
    """Weeks start on Sunday."""
    return today - timedelta(days=(today.weekday() + 1) % 7)


def build_dashboard_summary(
    tasks: Iterable[Task],
    sessions: Iterable[StudySession],
    expenses: Iterable[BudgetEntry],
    streak: Optional[Streak],
    weekly_budget: float,
    *,
    now: datetime,
    tz: ZoneInfo = _UTC,
) -> DashboardSummary:
    """Summarise already-fetched records into the home dashboard numbers."""
    today = now.date()
    start = week_start(today)
    task_list = list(tasks)

    open_tasks = [task for task in task_list if task.status != "completed"]
    completed = sum(1 for task in task_list if task.status == "completed")
    due_today = [task for task in open_tasks if task.planned_date == today or task.deadline == today]

    weekly_minutes = 0
    today_minutes = 0
    for session in sessions:
        started = _as_local_naive(session.started_at, tz)
        if started.date() < start:
            continue
        minutes = session.duration_minutes or 0
        weekly_minutes += minutes
        if started.date() == today:
            today_minutes += minutes

    return DashboardSummary(
        tasks_due_today=len(due_today),
        tasks_completed=completed,
        total_tasks=len(open_tasks) + completed,
        study_streak=streak.current_streak if streak else 0,
        budget_spent=_total(_week_expenses(expenses, start)),
        weekly_budget=weekly_budget,
        weekly_study_minutes=weekly_minutes,
        today_study_minutes=today_minutes,
        today_tasks=due_today[:TODAY_TASK_LIMIT],
    )


def build_budget_summary(expenses: Iterable[BudgetEntry], weekly_budget: float, *, today: date) -> BudgetSummary:
    """Weekly spend with per-category totals."""
    start = week_start(today)
    this_week = _week_expenses(expenses, start)

    totals: Dict[str, float] = {category: 0.0 for category in BUDGET_CATEGORIES}
    for entry in this_week:
        totals[entry.category] += float(entry.amount)

    spent = _total(this_week)
    return BudgetSummary(
        week_start=start,
        weekly_budget=weekly_budget,
        total_spent=spent,
        remaining=round(weekly_budget - spent, 2),
        over_budget=spent > weekly_budget,
        category_totals={category: round(value, 2) for category, value in totals.items()},
        active_categories=[category for category in BUDGET_CATEGORIES if totals[category] > 0],
    )


def _week_expenses(expenses: Iterable[BudgetEntry], start: date) -> List[BudgetEntry]:
    return [entry for entry in expenses if entry.entry_type == "expense" and entry.date >= start]


def _total(entries: Iterable[BudgetEntry]) -> float:
    return round(sum(float(entry.amount) for entry in entries), 2)


def _as_local_naive(value: datetime, tz: ZoneInfo) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)
