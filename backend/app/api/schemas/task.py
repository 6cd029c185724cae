"""Schemas for planner task snapshots."""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator

Priority = Literal["high", "medium", "low"]
TaskStatus = Literal["pending", "in_progress", "completed"]


class Task(BaseModel):
    """Read-only task record as fetched by the client from its data store."""

    id: str
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    deadline: Optional[date] = None
    priority: Priority = "medium"
    estimated_hours: Optional[float] = None
    status: TaskStatus = "pending"
    course: Optional[str] = None
    planned_date: Optional[date] = None
    source_text: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("title must not be blank")
        return v2

    @field_validator("deadline", "planned_date", mode="before")
    @classmethod
    def date_from_iso_prefix(cls, v: Any) -> Any:
        # parsed drafts carry full ISO datetimes; the planner works on calendar days
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            return v.split("T")[0]
        return v
