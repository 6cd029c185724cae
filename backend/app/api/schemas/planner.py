"""Schemas for the seven-day planner."""
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.task import Task
from app.api.schemas.wellness import WellnessCheckInRequest, WellnessMode, WellnessResult


class DayPlan(BaseModel):
    date: dt.date
    label: str
    tasks: List[Task] = Field(default_factory=list)
    total_hours: float = 0.0
    max_hours: float

    @property
    def is_overloaded(self) -> bool:
        return self.total_hours > self.max_hours


class PlanRequest(BaseModel):
    tasks: List[Task] = Field(default_factory=list)
    mode: Optional[WellnessMode] = None
    hours_per_day: Optional[float] = Field(default=None, gt=0, le=24)
    wellness: Optional[WellnessCheckInRequest] = Field(
        default=None,
        description="Latest check-in; used to derive the mode when no mode is given.",
    )


class PlanResponse(BaseModel):
    mode: WellnessMode
    days: List[DayPlan]
    scheduled_count: int
    overflow_dates: List[dt.date] = Field(default_factory=list)
    wellness: Optional[WellnessResult] = None
    request_id: str
