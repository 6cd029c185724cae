"""Seven-day task allocation under a per-day hour budget."""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from app.api.schemas.planner import DayPlan
from app.api.schemas.task import Task

logger = logging.getLogger(__name__)

PLAN_HORIZON_DAYS = 7
DEFAULT_HOURS_PER_DAY = 6.0
DEFAULT_TASK_HOURS = 1.5
LIGHT_MODE_CAPACITY = 0.6

PRIORITY_RANK: Dict[str, int] = {
    "high": 0,
    "medium": 1,
    "low": 2,
}


def generate_plan(
    tasks: Iterable[Task],
    mode: str = "normal",
    hours_per_day: float = DEFAULT_HOURS_PER_DAY,
    *,
    today: Optional[date] = None,
) -> List[DayPlan]:
    """
    Allocate open tasks across today and the next six days.

    Tasks are visited by deadline (undated last) then priority. Each one lands on its
    planned day when that day still has room, otherwise on the first day with room,
    otherwise on the least-loaded day even if that overloads it. Light mode shrinks
    the daily budget and hides everything that is not high priority.
    """
    base = today or date.today()
    max_hours = hours_per_day * LIGHT_MODE_CAPACITY if mode == "light" else hours_per_day

    candidates = select_candidates(tasks, mode)
    days = _build_days(base, max_hours)
    index_by_date = {day.date: idx for idx, day in enumerate(days)}

    for task in candidates:
        hours = task_hours(task)

        if task.planned_date is not None:
            pinned_idx = index_by_date.get(task.planned_date)
            if pinned_idx is not None:
                pinned = days[pinned_idx]
                if _has_room(pinned, hours):
                    _assign(pinned, task, hours)
                    continue
                logger.debug(
                    "Planned day %s is full for task %s (%.1fh); falling back",
                    task.planned_date,
                    task.id,
                    hours,
                )

        target = next((day for day in days if _has_room(day, hours)), None)
        if target is None:
            target = min(days, key=lambda day: day.total_hours)
            logger.debug(
                "No headroom for task %s (%.1fh); overflowing onto %s",
                task.id,
                hours,
                target.date,
            )
        _assign(target, task, hours)

    return days


def select_candidates(tasks: Iterable[Task], mode: str = "normal") -> List[Task]:
    """Return the tasks the planner will place, in placement order."""
    open_tasks = [task for task in tasks if task.status != "completed"]
    ordered = sorted(open_tasks, key=_sort_key)
    if mode == "light":
        return [task for task in ordered if task.priority == "high"]
    return ordered


def task_hours(task: Task) -> float:
    return task.estimated_hours or DEFAULT_TASK_HOURS


def day_label(day: date, offset: int) -> str:
    if offset == 0:
        return "Today"
    if offset == 1:
        return "Tomorrow"
    return f"{day:%a}, {day:%b} {day.day}"


def overflow_dates(days: Iterable[DayPlan]) -> List[date]:
    return [day.date for day in days if day.is_overloaded]


def _sort_key(task: Task) -> tuple:
    undated = task.deadline is None
    return (undated, task.deadline or date.max, PRIORITY_RANK.get(task.priority, 1))


def _build_days(base: date, max_hours: float) -> List[DayPlan]:
    days: List[DayPlan] = []
    for offset in range(PLAN_HORIZON_DAYS):
        current = base + timedelta(days=offset)
        days.append(
            DayPlan(
                date=current,
                label=day_label(current, offset),
                tasks=[],
                total_hours=0.0,
                max_hours=max_hours,
            )
        )
    return days


def _has_room(day: DayPlan, hours: float) -> bool:
    return day.total_hours + hours <= day.max_hours


def _assign(day: DayPlan, task: Task, hours: float) -> None:
    day.tasks.append(task)
    day.total_hours += hours
