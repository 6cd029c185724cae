from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from app.api.schemas.dashboard import BudgetEntry, StudySession, Streak
from app.api.schemas.task import Task
from app.services.dashboard_service import build_budget_summary, build_dashboard_summary, week_start

TODAY = date(2026, 3, 4)
NOW = datetime(2026, 3, 4, 18, 0)


def _expenses():
    return [
        BudgetEntry(id="e1", amount=12.5, category="food", date=date(2026, 3, 2)),
        BudgetEntry(id="e2", amount=100, entry_type="income", date=date(2026, 3, 3)),
        BudgetEntry(id="e3", amount=20, category="transport", date=date(2026, 2, 28)),
        BudgetEntry(id="e4", amount=7.25, category="school", date=TODAY),
    ]


def test_week_starts_on_sunday():
    assert week_start(TODAY) == date(2026, 3, 1)
    assert week_start(date(2026, 3, 1)) == date(2026, 3, 1)
    assert week_start(date(2026, 3, 7)) == date(2026, 3, 1)


def test_dashboard_summary_counts():
    tasks = [
        Task(id="t1", title="Essay", deadline=TODAY),
        Task(id="t2", title="Reading", planned_date=TODAY, status="in_progress"),
        Task(id="t3", title="Quiz", deadline=TODAY, status="completed"),
        Task(id="t4", title="Slides", deadline=TODAY + timedelta(days=1)),
    ]
    sessions = [
        StudySession(id="s1", started_at=datetime(2026, 3, 4, 9, 0), duration_minutes=60),
        StudySession(id="s2", started_at=datetime(2026, 3, 2, 20, 0), duration_minutes=30),
        StudySession(id="s3", started_at=datetime(2026, 2, 27, 10, 0), duration_minutes=45),
        StudySession(id="s4", started_at=datetime(2026, 3, 3, 8, 0)),
    ]
    summary = build_dashboard_summary(
        tasks, sessions, _expenses(), Streak(current_streak=3, longest_streak=4), 80, now=NOW
    )
    assert summary.tasks_due_today == 2
    assert [task.id for task in summary.today_tasks] == ["t1", "t2"]
    assert summary.tasks_completed == 1
    assert summary.total_tasks == 4
    assert summary.study_streak == 3
    assert summary.budget_spent == pytest.approx(19.75)
    assert summary.weekly_budget == 80
    assert summary.weekly_study_minutes == 90
    assert summary.today_study_minutes == 60


def test_dashboard_summary_caps_today_tasks_and_handles_missing_streak():
    tasks = [Task(id=f"t{i}", title=f"Task {i}", deadline=TODAY) for i in range(7)]
    summary = build_dashboard_summary(tasks, [], [], None, 0, now=NOW)
    assert summary.tasks_due_today == 7
    assert len(summary.today_tasks) == 5
    assert summary.study_streak == 0


def test_aware_session_times_are_bucketed_in_local_time():
    session = StudySession(
        id="s1",
        started_at=datetime(2026, 3, 4, 1, 0, tzinfo=ZoneInfo("UTC")),
        duration_minutes=25,
    )
    summary = build_dashboard_summary(
        [], [session], [], None, 0, now=NOW, tz=ZoneInfo("America/New_York")
    )
    assert summary.weekly_study_minutes == 25
    assert summary.today_study_minutes == 0


def test_budget_summary_within_budget():
    summary = build_budget_summary(_expenses(), 100, today=TODAY)
    assert summary.week_start == date(2026, 3, 1)
    assert summary.total_spent == pytest.approx(19.75)
    assert summary.remaining == pytest.approx(80.25)
    assert summary.over_budget is False
    assert summary.category_totals == {
        "food": 12.5,
        "school": 7.25,
        "transport": 0.0,
        "entertainment": 0.0,
        "other": 0.0,
    }
    assert summary.active_categories == ["food", "school"]


def test_budget_summary_over_budget():
    summary = build_budget_summary(_expenses(), 15, today=TODAY)
    assert summary.over_budget is True
    assert summary.remaining == pytest.approx(-4.75)
