"""Schemas for wellness check-ins."""
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

WellnessMode = Literal["normal", "light"]
WellnessLevel = Literal["good", "medium", "low"]


class WellnessInput(BaseModel):
    stress: float = Field(..., description="Self-reported stress, 0-10.")
    sleep_hours: float = Field(..., description="Hours slept last night.")
    energy: float = Field(..., description="Self-reported energy, 0-10.")


class WellnessResult(BaseModel):
    score: float
    mode: WellnessMode
    level: WellnessLevel
    tips: List[str] = Field(default_factory=list)


class WellnessCheckInRequest(BaseModel):
    stress: float = Field(..., ge=0, le=10)
    sleep_hours: float = Field(..., ge=0, le=24)
    energy: float = Field(..., ge=0, le=10)


class WellnessCheckInResponse(WellnessResult):
    request_id: str
