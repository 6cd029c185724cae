"""Wellness check-in scoring and mode selection."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from app.api.schemas.wellness import WellnessInput, WellnessResult

SLEEP_TARGET_HOURS = 8
GOOD_THRESHOLD = 7
LOW_THRESHOLD = 4


def calculate_wellness(wellness_input: WellnessInput) -> WellnessResult:
    """
    Score a check-in on a 0-10 scale and derive the planner mode.

    The score is the unweighted mean of calmness (10 - stress), sleep credit capped at
    eight hours, and energy. Inputs are not range-checked; callers bound them.
    """
    stress = wellness_input.stress
    sleep_hours = wellness_input.sleep_hours
    energy = wellness_input.energy

    sleep_normalized = min(sleep_hours / SLEEP_TARGET_HOURS, 1) * 10
    score = _round1(((10 - stress) + sleep_normalized + energy) / 3)

    if score > GOOD_THRESHOLD:
        level, mode = "good", "normal"
    elif score >= LOW_THRESHOLD:
        level, mode = "medium", "normal"
    else:
        level, mode = "low", "light"

    return WellnessResult(
        score=score,
        mode=mode,
        level=level,
        tips=_build_tips(stress, sleep_hours, energy, score),
    )


def _build_tips(stress: float, sleep_hours: float, energy: float, score: float) -> List[str]:
    # order is the display order
    tips: List[str] = []
    if stress > 7:
        tips.append("Try a 5-minute breathing exercise between study sessions.")
    if stress > 5:
        tips.append("Consider breaking your tasks into smaller chunks.")
    if sleep_hours < 6:
        tips.append("Aim for 7-8 hours of sleep tonight. Sleep is crucial for memory.")
    if sleep_hours < 4:
        tips.append("Sleep deprivation severely impacts learning. Prioritize rest.")
    if energy < 4:
        tips.append("Take a short walk or do light stretching to boost energy.")
    if energy < 3:
        tips.append("Consider a short 20-minute power nap if possible.")
    if score > GOOD_THRESHOLD:
        tips.append("You're doing great! Perfect time for challenging tasks.")
    if LOW_THRESHOLD <= score <= GOOD_THRESHOLD:
        tips.append("Moderate day: focus on your most important tasks only.")
    if score < LOW_THRESHOLD:
        tips.append("Light Mode activated: only essential tasks shown in your planner.")
    return tips


def _round1(value: float) -> float:
    """Round half-up to one decimal using the exact binary value of the float."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
