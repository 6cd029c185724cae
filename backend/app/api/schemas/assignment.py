"""Schemas for pasted assignment parsing."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.task import Priority


class ParsedTask(BaseModel):
    """Draft task extracted from pasted text; not yet persisted."""

    title: str
    deadline: Optional[str] = None
    priority: Priority = "medium"
    estimated_hours: float = 1.5
    course: Optional[str] = None


class AssignmentParseRequest(BaseModel):
    text: str = Field(..., max_length=20000)


class AssignmentParseResponse(BaseModel):
    tasks: List[ParsedTask]
    count: int
    request_id: str
