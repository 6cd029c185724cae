"""Schemas for dashboard, budget and streak endpoints."""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from app.api.schemas.task import Task

BudgetCategory = Literal["food", "school", "transport", "entertainment", "other"]
EntryType = Literal["income", "expense"]

BUDGET_CATEGORIES: tuple[str, ...] = ("food", "school", "transport", "entertainment", "other")


class StudySession(BaseModel):
    id: str
    task_id: Optional[str] = None
    started_at: dt.datetime
    ended_at: Optional[dt.datetime] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


class BudgetEntry(BaseModel):
    id: str
    amount: float
    category: BudgetCategory = "other"
    description: Optional[str] = None
    entry_type: EntryType = "expense"
    date: dt.date


class Streak(BaseModel):
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    last_active: Optional[dt.date] = None


class DashboardSummary(BaseModel):
    tasks_due_today: int
    tasks_completed: int
    total_tasks: int
    study_streak: int
    budget_spent: float
    weekly_budget: float
    weekly_study_minutes: int
    today_study_minutes: int
    today_tasks: List[Task] = Field(default_factory=list)


class BudgetSummary(BaseModel):
    week_start: dt.date
    weekly_budget: float
    total_spent: float
    remaining: float
    over_budget: bool
    category_totals: Dict[str, float]
    active_categories: List[BudgetCategory] = Field(default_factory=list)


class DashboardSummaryRequest(BaseModel):
    tasks: List[Task] = Field(default_factory=list)
    sessions: List[StudySession] = Field(default_factory=list)
    expenses: List[BudgetEntry] = Field(default_factory=list)
    streak: Optional[Streak] = None
    weekly_budget: float = Field(0.0, ge=0)


class DashboardSummaryResponse(DashboardSummary):
    request_id: str


class BudgetSummaryRequest(BaseModel):
    expenses: List[BudgetEntry] = Field(default_factory=list)
    weekly_budget: float = Field(100.0, ge=0)


class BudgetSummaryResponse(BudgetSummary):
    request_id: str


class StreakAdvanceRequest(BaseModel):
    streak: Optional[Streak] = None
    completed_on: Optional[dt.date] = None


class StreakResponse(Streak):
    request_id: str


class StreakResetRequest(BaseModel):
    streak: Streak
